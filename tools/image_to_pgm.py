import argparse
from pathlib import Path

import cv2 as cv
import numpy as np

from netpbm.writer import encode_graymap

parser = argparse.ArgumentParser(description="Convert any image OpenCV can read into a PGM (P5 or P2) file")

parser.add_argument(
    "inputs",
    type=Path,
    nargs='+',
    help="Images to convert"
)

parser.add_argument(
    "-o",
    "--output",
    type=Path,
    default=Path("pgm"),
    help="Output directory for the converted images (defaults to 'pgm')"
)

parser.add_argument(
    "--size",
    type=int,
    nargs=2,
    metavar=("WIDTH", "HEIGHT"),
    default=None,
    help="Resize every image to WIDTH x HEIGHT before converting"
)

parser.add_argument(
    "--ascii",
    action="store_true",
    help="Write plain (P2) files instead of raw (P5) files"
)

args = parser.parse_args()

args.output.mkdir(parents=True, exist_ok=True)

for image_location in args.inputs:
    # IMREAD_ANYDEPTH keeps 16-bit sources at 16 bits
    array_image_data = cv.imread(str(image_location), cv.IMREAD_GRAYSCALE | cv.IMREAD_ANYDEPTH)

    if array_image_data is None:
        print(f"Skipping '{image_location}': OpenCV could not read it")
        continue

    if args.size is not None:
        array_image_data = cv.resize(array_image_data, tuple(args.size), interpolation=cv.INTER_AREA)

    if array_image_data.dtype == np.uint8:
        max_value = 255
    elif array_image_data.dtype == np.uint16:
        max_value = 65535
    else:
        print(f"Skipping '{image_location}': unsupported sample type {array_image_data.dtype}")
        continue

    height, width = array_image_data.shape

    pgm_bytes = encode_graymap(
        array_image_data.ravel().tolist(),
        width,
        height,
        max_value,
        binary=not args.ascii,
        comment=f"converted from {image_location.name}"
    )

    output_path = args.output / image_location.with_suffix('.pgm').name

    with open(output_path, 'wb') as output_file:
        output_file.write(pgm_bytes)

    print(f"Wrote '{output_path}' ({width}x{height}, max value {max_value})")

"""Rendering for decoded images: 8-bit gray pixels or terminal block glyphs."""
import numpy as np

from .image import NetpbmImage

GLYPHS = ' ░▒▓█'

# Upper bounds (exclusive) of the normalized intensity for every glyph but the last
GLYPH_THRESHOLDS = (0.2, 0.4, 0.6, 0.8)

ESCAPE_KEY = 27
QUIT_KEYS = (ESCAPE_KEY, ord('q'))

DEFAULT_WINDOW_TITLE = 'netpbm'


class DisplayError(RuntimeError):
    """OpenCV is missing or cannot open a window on this system."""


def normalize(image: NetpbmImage) -> np.ndarray:
    samples = np.asarray(image.data, dtype=np.float64)

    # Samples above max_value are not rejected by the decoder, they saturate to white
    return np.clip(samples / image.max_value, 0.0, 1.0).reshape((image.height, image.width))


def to_grayscale(image: NetpbmImage) -> np.ndarray:
    # Truncates like a float to u8 cast rather than rounding
    return (normalize(image) * 255).astype(np.uint8)


def to_glyphs(image: NetpbmImage) -> str:
    indices = np.digitize(normalize(image), GLYPH_THRESHOLDS)

    return ''.join(''.join(GLYPHS[index] for index in row) + '\n' for row in indices)


def show(image: NetpbmImage, *, title: str = DEFAULT_WINDOW_TITLE, scale: int = 1) -> None:
    """Display the image in a window until Escape or 'q' is pressed or the window is closed."""
    try:
        import cv2
    except ImportError as e:
        raise DisplayError(f"OpenCV is required to show images in a window: {e}") from e

    pixels = to_grayscale(image)

    try:
        if scale > 1:
            pixels = cv2.resize(
                pixels,
                (image.width * scale, image.height * scale),
                interpolation=cv2.INTER_NEAREST
            )

        _show_until_closed(cv2, pixels, title)
    except cv2.error as e:
        # Headless builds raise here as soon as a window is requested
        raise DisplayError(f"OpenCV could not show the image: {e}") from e


def _show_until_closed(cv2, pixels: np.ndarray, title: str) -> None:
    cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
    cv2.imshow(title, pixels)

    try:
        while True:
            key = cv2.waitKey(50)

            if key != -1 and (key & 0xFF) in QUIT_KEYS:
                break

            # Closing the window is the quit signal
            if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                break
    finally:
        cv2.destroyAllWindows()

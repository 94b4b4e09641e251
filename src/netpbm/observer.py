import sys
from typing import Callable, TextIO

# Receives human readable diagnostics from the decoder; never required for correctness
Observer = Callable[[str], None]


def silent(message: str) -> None:
    pass


def stderr_observer(prefix: str = 'netpbm', stream: TextIO | None = None) -> Observer:
    def observe(message: str) -> None:
        print(f"[{prefix}] {message}", file=sys.stderr if stream is None else stream)

    return observe

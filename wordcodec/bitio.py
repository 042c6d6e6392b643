from __future__ import annotations

from typing import Iterator

MAX_WIDTH = 64


def iter_bits(data: bytes, width: int) -> Iterator[int]:
    """Yield consecutive ``width``-bit unsigned integers from ``data``, MSB first.

    Windows may straddle byte boundaries. Reading stops as soon as fewer than
    ``width`` bits remain; that trailing partial window is dropped.
    """
    if not 1 <= width <= MAX_WIDTH:
        raise ValueError(f"window width must be in 1..{MAX_WIDTH}, got {width}")
    return _iter_bits(memoryview(bytes(data)), width)


def _iter_bits(buf: memoryview, width: int) -> Iterator[int]:
    mask = (1 << width) - 1
    acc = 0
    held = 0
    pos = 0
    while True:
        while held < width:
            if pos >= len(buf):
                return
            acc = (acc << 8) | buf[pos]
            pos += 1
            held += 8
        held -= width
        yield (acc >> held) & mask
        # keep only the unread low bits
        acc &= (1 << held) - 1


def count_windows(n_bytes: int, width: int) -> int:
    """Number of values ``iter_bits`` yields for an input of ``n_bytes``."""
    return (8 * n_bytes) // width

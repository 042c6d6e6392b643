from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, Sequence

from .compressors import get_compressor, resolve_compressor
from .encoder import WordEncoder
from .wordlists import get_words


@dataclass
class EncodeStats:
    dictionary: str
    compressor: str
    input_bytes: int
    compressed_bytes: int
    words: int
    chars: int
    efficiency: float
    seconds: float


def measure(encoder: WordEncoder, data: bytes, *, dictionary: str = "", compressor: str = "") -> EncodeStats:
    """Encode ``data`` once and report the size of the result."""
    t0 = time.perf_counter()
    packed = encoder.compressor(data)
    tokens = encoder.encode_packed(packed)
    elapsed = time.perf_counter() - t0
    return EncodeStats(
        dictionary=dictionary,
        compressor=compressor,
        input_bytes=len(data),
        compressed_bytes=len(packed),
        words=len(tokens),
        chars=len(" ".join(tokens)),
        efficiency=encoder.efficiency(),
        seconds=elapsed,
    )


def iter_matrix(data: bytes, dictionaries: Sequence[str], compressors: Sequence[str]) -> Iterator[EncodeStats]:
    """Measure every (compressor, dictionary) pair, compressor-major."""
    encoders = {d: WordEncoder(get_words(d)) for d in dictionaries}
    for c in compressors:
        key = resolve_compressor(c)
        for d in dictionaries:
            enc = encoders[d]
            enc.compressor = get_compressor(key)
            yield measure(enc, data, dictionary=d, compressor=key)

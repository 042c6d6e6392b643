from __future__ import annotations

import gzip
import lzma
import zlib
from typing import Callable, Dict, Iterable

# A compressor maps raw bytes to compressed bytes and raises on failure.
Compressor = Callable[[bytes], bytes]


def compress_none(data: bytes) -> bytes:
    return bytes(data)


def compress_zlib(data: bytes) -> bytes:
    return zlib.compress(data, zlib.Z_BEST_COMPRESSION)


def compress_gzip(data: bytes) -> bytes:
    # mtime=0 keeps the header, and therefore the word output, reproducible.
    return gzip.compress(data, compresslevel=9, mtime=0)


def compress_lzma(data: bytes) -> bytes:
    return lzma.compress(data, format=lzma.FORMAT_ALONE, preset=9)


COMPRESSORS: Dict[str, Compressor] = {
    "none": compress_none,
    "zlib": compress_zlib,
    "gzip": compress_gzip,
    "lzma": compress_lzma,
}

COMPRESSOR_ALIASES: Dict[str, str] = {
    "identity": "none",
    "raw": "none",
    "deflate": "zlib",
    "gz": "gzip",
    "lzma-alone": "lzma",
}

DEFAULT_COMPRESSOR = "zlib"


def list_compressors() -> Iterable[str]:
    return sorted(COMPRESSORS.keys())


def resolve_compressor(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("compressor name must be a non-empty string")
    normalized = name.strip().lower()
    if normalized in COMPRESSORS:
        return normalized
    if normalized in COMPRESSOR_ALIASES:
        return COMPRESSOR_ALIASES[normalized]
    raise ValueError(
        f"unknown compressor {name!r}. Available keys: {', '.join(list_compressors())}"
    )


def get_compressor(name: str) -> Compressor:
    return COMPRESSORS[resolve_compressor(name)]


__all__ = [
    "Compressor",
    "COMPRESSORS",
    "DEFAULT_COMPRESSOR",
    "compress_none",
    "compress_zlib",
    "compress_gzip",
    "compress_lzma",
    "list_compressors",
    "resolve_compressor",
    "get_compressor",
]

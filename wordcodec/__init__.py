"""
wordcodec: a base64-like encoding that spells binary data with dictionary words.

Pipeline:
    raw bytes -> compressor -> fixed-width bit windows -> word indices
              -> dictionary lookup -> run-length folding -> tokens

Usage:
    from wordcodec import WordEncoder, compress_lzma

    enc = WordEncoder.default()
    enc.compressor = compress_lzma
    tokens = enc.encode(b"hello world")
"""

from .bitio import count_windows, iter_bits
from .compressors import (
    COMPRESSORS,
    Compressor,
    compress_gzip,
    compress_lzma,
    compress_none,
    compress_zlib,
    get_compressor,
    resolve_compressor,
)
from .config import EncoderConfig
from .encoder import MIN_RUN_LENGTH, WordEncoder, bits_per_word
from .errors import (
    ConfigurationError,
    DictionaryTooLargeError,
    DictionaryTooSmallError,
    WordcodecError,
)
from .wordlists import get_words, load_words, parse_words

__version__ = "0.1.0"
__all__ = [
    # Encoder
    "WordEncoder",
    "EncoderConfig",
    "MIN_RUN_LENGTH",
    "bits_per_word",
    # Bits
    "iter_bits",
    "count_windows",
    # Compressors
    "Compressor",
    "COMPRESSORS",
    "compress_none",
    "compress_zlib",
    "compress_gzip",
    "compress_lzma",
    "get_compressor",
    "resolve_compressor",
    # Dictionaries
    "get_words",
    "load_words",
    "parse_words",
    # Errors
    "WordcodecError",
    "ConfigurationError",
    "DictionaryTooSmallError",
    "DictionaryTooLargeError",
]

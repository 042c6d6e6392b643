import gzip
import lzma
import zlib

import pytest

from wordcodec.compressors import (
    COMPRESSORS,
    compress_gzip,
    compress_lzma,
    compress_none,
    compress_zlib,
    get_compressor,
    list_compressors,
    resolve_compressor,
)

SAMPLE = b"int main(void) { return 0; }\n" * 50


@pytest.mark.parametrize(
    "compress, decompress",
    [
        (compress_none, bytes),
        (compress_zlib, zlib.decompress),
        (compress_gzip, gzip.decompress),
        (compress_lzma, lzma.decompress),
    ],
)
def test_reference_compressors_are_lossless(compress, decompress):
    assert decompress(compress(SAMPLE)) == SAMPLE


@pytest.mark.parametrize("name", ["zlib", "gzip", "lzma"])
def test_real_compressors_shrink_repetitive_input(name):
    assert len(get_compressor(name)(SAMPLE)) < len(SAMPLE)


def test_identity_returns_input_unchanged():
    assert compress_none(b"") == b""
    assert compress_none(bytearray(b"abc")) == b"abc"


def test_zlib_uses_best_compression():
    # FLEVEL bits of the zlib header say "maximum compression"
    assert compress_zlib(SAMPLE)[:2] == b"\x78\xda"


def test_gzip_output_is_reproducible():
    out = compress_gzip(SAMPLE)
    assert out[:2] == b"\x1f\x8b"
    assert out[4:8] == b"\x00\x00\x00\x00"  # mtime
    assert compress_gzip(SAMPLE) == out


def test_lzma_writes_legacy_container():
    out = compress_lzma(SAMPLE)
    assert lzma.decompress(out, format=lzma.FORMAT_ALONE) == SAMPLE


def test_registry():
    assert list(list_compressors()) == ["gzip", "lzma", "none", "zlib"]
    assert set(COMPRESSORS) == {"none", "zlib", "gzip", "lzma"}


@pytest.mark.parametrize(
    "name, key",
    [("zlib", "zlib"), (" GZIP ", "gzip"), ("identity", "none"), ("raw", "none"), ("lzma-alone", "lzma"), ("deflate", "zlib")],
)
def test_resolve_compressor(name, key):
    assert resolve_compressor(name) == key
    assert get_compressor(name) is COMPRESSORS[key]


@pytest.mark.parametrize("name", ["brotli", "xz", "", "   "])
def test_unknown_compressor(name):
    with pytest.raises(ValueError):
        resolve_compressor(name)

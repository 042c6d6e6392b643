import pytest

from wordcodec.config import EncoderConfig


def test_defaults():
    cfg = EncoderConfig()
    assert cfg.dictionary == "large"
    assert cfg.compressor == "zlib"
    assert cfg.dict_efficiency is False
    assert cfg.log_level == "INFO"


def test_json_roundtrip():
    cfg = EncoderConfig(dictionary="small", compressor="lzma", dict_efficiency=True, log_level="DEBUG")
    assert EncoderConfig.from_json(cfg.to_json()) == cfg


def test_from_dict_normalizes():
    cfg = EncoderConfig.from_dict({"compressor": "gzip", "dict_efficiency": 1, "log_level": "warning"})
    assert cfg.compressor == "gzip"
    assert cfg.dict_efficiency is True
    assert cfg.log_level == "WARNING"
    assert cfg.dictionary == "large"


def test_unknown_keys_rejected():
    with pytest.raises(ValueError, match="bogus"):
        EncoderConfig.from_dict({"bogus": 1})


def test_json_must_be_object():
    with pytest.raises(ValueError):
        EncoderConfig.from_json("[1, 2]")

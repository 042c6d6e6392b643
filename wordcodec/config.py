from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .compressors import DEFAULT_COMPRESSOR
from .wordlists import DEFAULT_WORDLIST


@dataclass
class EncoderConfig:
    """Settings for building an encoder from the command line or a JSON file."""

    dictionary: str = DEFAULT_WORDLIST  # registry key or path to a word list
    compressor: str = DEFAULT_COMPRESSOR
    dict_efficiency: bool = False
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "EncoderConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(obj) - known)
        if unknown:
            raise ValueError(f"Unknown EncoderConfig keys: {', '.join(unknown)}")
        cfg = cls(**obj)
        cfg.dict_efficiency = bool(cfg.dict_efficiency)
        cfg.log_level = str(cfg.log_level).upper()
        return cfg

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, s: str) -> "EncoderConfig":
        obj = json.loads(s)
        if not isinstance(obj, dict):
            raise ValueError("EncoderConfig JSON must be an object")
        return cls.from_dict(obj)

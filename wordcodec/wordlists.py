from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Union

logger = logging.getLogger(__name__)

WORDLIST_DIR = Path(__file__).resolve().parent / "data"

WORDLIST_REGISTRY: Dict[str, str] = {
    "small": "words256.txt",
    "medium": "words512.txt",
    "large": "words1024.txt",
}

WORDLIST_ALIASES: Dict[str, str] = {
    "256": "small",
    "512": "medium",
    "1024": "large",
    "words256": "small",
    "words512": "medium",
    "words1024": "large",
    "default": "large",
}

DEFAULT_WORDLIST = "large"


def list_wordlists() -> Iterable[str]:
    return sorted(WORDLIST_REGISTRY.keys())


def parse_words(text: str) -> List[str]:
    """Split a dictionary source on whitespace. The first token is index 0."""
    return text.split()


def load_words(path: Union[str, Path]) -> List[str]:
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        words = parse_words(f.read())
    logger.debug("loaded %d words from %s", len(words), path)
    return words


def resolve_wordlist(name_or_path: Union[str, Path]) -> Path:
    """Map a registry key, an alias, or a file path to a word list file."""
    if isinstance(name_or_path, Path):
        return name_or_path
    if not isinstance(name_or_path, str) or not name_or_path.strip():
        raise ValueError("dictionary must be a non-empty string")
    normalized = name_or_path.strip().lower()
    if normalized in WORDLIST_REGISTRY:
        return WORDLIST_DIR / WORDLIST_REGISTRY[normalized]
    if normalized in WORDLIST_ALIASES:
        return WORDLIST_DIR / WORDLIST_REGISTRY[WORDLIST_ALIASES[normalized]]
    path = Path(name_or_path)
    if path.is_file():
        return path
    raise ValueError(
        f"unknown dictionary {name_or_path!r}: not a file and not one of "
        f"{', '.join(list_wordlists())}"
    )


def get_words(name_or_path: Union[str, Path] = DEFAULT_WORDLIST) -> List[str]:
    return load_words(resolve_wordlist(name_or_path))


def numeric_words(words: Sequence[str]) -> List[str]:
    """Words that a reader of the output could mistake for a repeat count."""
    return [w for w in words if w.isdecimal()]


__all__ = [
    "WORDLIST_REGISTRY",
    "DEFAULT_WORDLIST",
    "list_wordlists",
    "parse_words",
    "load_words",
    "resolve_wordlist",
    "get_words",
    "numeric_words",
]

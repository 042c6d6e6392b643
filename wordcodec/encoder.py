"""Word encoder: compressed bytes to a run-length packed sequence of words.

```python
from wordcodec import WordEncoder

enc = WordEncoder.default()
print(enc.encode_text(b"hello world"))
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Tuple

from .bitio import MAX_WIDTH, iter_bits
from .compressors import Compressor, compress_zlib, get_compressor
from .errors import DictionaryTooLargeError, DictionaryTooSmallError
from .wordlists import DEFAULT_WORDLIST, get_words

if TYPE_CHECKING:
    from .config import EncoderConfig

# Runs at least this long are written as "<count> <word>".
MIN_RUN_LENGTH = 4


def bits_per_word(n_words: int) -> int:
    """floor(log2(n_words)), validated for use as a window width."""
    if n_words < 2:
        raise DictionaryTooSmallError(n_words)
    bits = n_words.bit_length() - 1
    if bits > MAX_WIDTH:
        raise DictionaryTooLargeError(n_words, bits)
    return bits


class WordEncoder:
    """Encodes byte strings as sequences of dictionary words.

    The dictionary and the derived window width are fixed at construction.
    ``compressor`` may be replaced at any time; it is the only thing ``encode``
    calls out to.
    """

    def __init__(self, words: Sequence[str], compressor: Compressor = compress_zlib):
        self._bits = bits_per_word(len(words))
        self._words: Tuple[str, ...] = tuple(words)
        self.compressor = compressor

    @classmethod
    def default(cls) -> "WordEncoder":
        return cls(get_words(DEFAULT_WORDLIST))

    @classmethod
    def from_config(cls, cfg: "EncoderConfig") -> "WordEncoder":
        return cls(get_words(cfg.dictionary), compressor=get_compressor(cfg.compressor))

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def bits_per_word(self) -> int:
        return self._bits

    def efficiency(self) -> float:
        """Share of the dictionary reachable with ``bits_per_word`` bits."""
        return (1 << self._bits) / len(self._words)

    def encode(self, data: bytes) -> List[str]:
        packed = self.compressor(data)
        return self.encode_packed(packed)

    def encode_text(self, data: bytes) -> str:
        return " ".join(self.encode(data))

    def encode_packed(self, packed: bytes) -> List[str]:
        """Encode bytes that have already been through ``compressor``."""
        out: List[str] = []
        last_word = ""
        last_count = 0

        def flush() -> None:
            if last_count >= MIN_RUN_LENGTH:
                out.append(str(last_count))
                out.append(last_word)
            else:
                out.extend([last_word] * last_count)

        for index in iter_bits(packed, self._bits):
            word = self._words[index]
            if last_count and word == last_word:
                last_count += 1
                continue
            flush()
            last_word = word
            last_count = 1

        flush()
        return out

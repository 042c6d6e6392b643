from __future__ import annotations


class WordcodecError(Exception):
    """Base class for errors raised by wordcodec itself."""


class ConfigurationError(WordcodecError, ValueError):
    """The encoder cannot be built from the supplied dictionary or settings."""


class DictionaryTooSmallError(ConfigurationError):
    def __init__(self, n_words: int):
        super().__init__(f"invalid number of words: {n_words} (minimum 2)")
        self.n_words = n_words


class DictionaryTooLargeError(ConfigurationError):
    def __init__(self, n_words: int, bits: int):
        super().__init__(f"too many words: {n_words} ({bits} bits per word, maximum 64)")
        self.n_words = n_words
        self.bits = bits

from typing import List, Protocol

from nltk.tokenize import RegexpTokenizer


# Runs of letters, digits and underscore; everything else separates tokens.
WORD_PATTERN = r"\w+"


class Tokenizer(Protocol):
    def tokenize(self, text: str) -> List[str]:
        ...


class WordTokenizer:
    """Splits text into word tokens, dropping whitespace and punctuation."""

    def __init__(self, pattern=WORD_PATTERN):
        self.pattern = pattern
        self._tokenizer = RegexpTokenizer(pattern)

    def tokenize(self, text: str) -> List[str]:
        return self._tokenizer.tokenize(text)

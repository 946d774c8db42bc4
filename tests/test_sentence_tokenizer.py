# tests/test_sentence_tokenizer.py
import pytest

from tokenplot.sentence_tokenizer import WordTokenizer


@pytest.fixture
def tokenizer():
    return WordTokenizer()


def test_splits_on_whitespace(tokenizer):
    assert tokenizer.tokenize("Hello world") == ["Hello", "world"]
    assert tokenizer.tokenize("cat dog bird") == ["cat", "dog", "bird"]


def test_drops_punctuation(tokenizer):
    assert tokenizer.tokenize("Hi, there! How's it going?") == ["Hi", "there", "How", "s", "it", "going"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n", "!!! ... ?", "-- , --"])
def test_no_tokens_for_blank_or_punctuation(tokenizer, text):
    assert tokenizer.tokenize(text) == []


@pytest.mark.parametrize("text", ["The quick brown fox", "numbers 42 and_underscores", "naïve café"])
def test_tokens_are_nonempty_substrings(tokenizer, text):
    tokens = tokenizer.tokenize(text)
    assert len(tokens) >= 1
    for token in tokens:
        assert token
        assert token in text

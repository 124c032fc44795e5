"""
Unit Tests for the Tokenizer
============================

Word splitting on the non-letter separator class and ASCII-only case folding.
"""

import pytest

from wordgraph.tokenizer import Tokenizer, WORD_SEPARATOR


class TestTokenize:
    """Tests for Tokenizer.tokenize."""

    def setup_method(self):
        self.tokenizer = Tokenizer()

    def test_basic_tokenization(self):
        """Words are split on whitespace and lowercased."""
        assert self.tokenizer.tokenize("Hello World") == ["hello", "world"]

    def test_empty_text(self):
        assert self.tokenizer.tokenize("") == []

    def test_only_separators(self):
        """Digits, punctuation and whitespace alone produce no words."""
        assert self.tokenizer.tokenize("  123 ,.;!? \n\t 4 ") == []

    def test_digits_split_words(self):
        """Digits are separators, so alphanumerics break apart."""
        assert self.tokenizer.tokenize("word2vec") == ["word", "vec"]

    def test_leading_and_trailing_separators(self):
        """No empty fragments at either end."""
        assert self.tokenizer.tokenize("...start, end!!!") == ["start", "end"]

    def test_non_ascii_is_separator(self):
        """Chinese characters and accented letters separate words."""
        assert self.tokenizer.tokenize("qUiCk你JuMps好ovEr") == ["quick", "jumps", "over"]
        assert self.tokenizer.tokenize("café") == ["caf"]

    def test_only_non_ascii(self):
        assert self.tokenizer.tokenize("你好") == []

    def test_apostrophe_and_hyphen_split(self):
        assert self.tokenizer.tokenize("don't well-known") == ["don", "t", "well", "known"]

    def test_separator_runs_are_interchangeable(self):
        """Any run of non-letters can replace any other."""
        a = self.tokenizer.tokenize("one two,three")
        b = self.tokenizer.tokenize("one--!!--two\n\n\n3three")
        assert a == b == ["one", "two", "three"]


class TestPreservingCase:
    """Tests for the original-case token sequence."""

    def setup_method(self):
        self.tokenizer = Tokenizer()

    def test_keeps_case(self):
        assert self.tokenizer.tokenize_preserving_case("qUiCk JuMps") == ["qUiCk", "JuMps"]

    def test_pair_is_aligned(self):
        """Lowercase and original sequences line up index by index."""
        lower, original = self.tokenizer.tokenize_pair("The QUICK, brown Fox")
        assert lower == ["the", "quick", "brown", "fox"]
        assert original == ["The", "QUICK", "brown", "Fox"]
        assert [w.lower() for w in original] == lower

    def test_pair_of_empty_text(self):
        assert self.tokenizer.tokenize_pair("") == ([], [])


class TestNormalize:
    """Tests for single-word normalization."""

    def test_ascii_lowercase(self):
        assert Tokenizer().normalize("FoX") == "fox"

    def test_non_ascii_untouched(self):
        """Only A-Z are folded."""
        assert Tokenizer().normalize("ÉCOLE") == "École"


def test_separator_pattern():
    """The separator is one or more non-ASCII-letter characters."""
    assert WORD_SEPARATOR.pattern == r'[^a-zA-Z]+'


@pytest.mark.parametrize("text,expected", [
    ("a", ["a"]),
    ("A b C", ["a", "b", "c"]),
    ("x_y", ["x", "y"]),
])
def test_small_inputs(text, expected):
    assert Tokenizer().tokenize(text) == expected

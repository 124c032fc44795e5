"""
Tokenizer Module
================

Splits raw text into words for graph construction.

A word is a maximal run of ASCII letters. Everything else (digits,
punctuation, whitespace and any non-ASCII character, including letters
outside A-Z) separates words. Lowercasing is ASCII-only, so the lowercase
and original-case sequences always line up position by position.
"""

import re
from typing import List, Tuple


# Everything that is not an ASCII letter separates words.
WORD_SEPARATOR = re.compile(r'[^a-zA-Z]+')


def _ascii_lower(word: str) -> str:
    """Lowercase A-Z only (str.lower() would also fold non-ASCII letters)."""
    return word.translate(_ASCII_LOWER_TABLE)


_ASCII_LOWER_TABLE = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ',
    'abcdefghijklmnopqrstuvwxyz',
)


class Tokenizer:
    """
    Word tokenizer for the adjacency graph.

    Example:
        >>> tokenizer = Tokenizer()
        >>> tokenizer.tokenize("Hello, World! 42 times")
        ['hello', 'world', 'times']
        >>> tokenizer.tokenize_preserving_case("qUiCk你JuMps")
        ['qUiCk', 'JuMps']
    """

    def tokenize_preserving_case(self, text: str) -> List[str]:
        """
        Split text into words, keeping their original case.

        Args:
            text: Arbitrary input text

        Returns:
            Words in order of appearance; never contains empty strings
        """
        if not text:
            return []
        return [part for part in WORD_SEPARATOR.split(text) if part]

    def tokenize(self, text: str) -> List[str]:
        """
        Split text into lowercase words.

        Args:
            text: Arbitrary input text

        Returns:
            Lowercase words in order of appearance
        """
        return [_ascii_lower(word) for word in self.tokenize_preserving_case(text)]

    def tokenize_pair(self, text: str) -> Tuple[List[str], List[str]]:
        """
        Tokenize once and return both the lowercase and original-case sequences.

        Both lists have the same length and index i refers to the same word.

        Returns:
            Tuple of (lowercase_words, original_words)
        """
        original = self.tokenize_preserving_case(text)
        return [_ascii_lower(word) for word in original], original

    def normalize(self, word: str) -> str:
        """Normalize a single query word the way tokens are stored (ASCII lowercase)."""
        return _ascii_lower(word)

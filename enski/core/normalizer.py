"""Text normalization utilities for consistent headword processing."""

import re
import unicodedata
from typing import List


class TextNormalizer:
    """Handles text normalization for queries and headwords."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Compile regex patterns for performance
        self.whitespace_regex = re.compile(r'\s+')
        self.token_regex = re.compile(r'[^\W_]+')

    def normalize(self, text: str) -> str:
        """
        Normalize text for consistent processing.

        Lowercases, decomposes Unicode characters, drops combining marks
        and collapses runs of whitespace.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text
        """
        if not text:
            return ""

        # Convert to lowercase
        normalized = text.lower()

        # Normalize Unicode characters and strip diacritics
        normalized = unicodedata.normalize('NFKD', normalized)
        normalized = ''.join(ch for ch in normalized if not unicodedata.combining(ch))

        # Collapse whitespace
        normalized = self.whitespace_regex.sub(' ', normalized)

        return normalized.strip()

    def tokenize(self, text: str) -> List[str]:
        """
        Tokenize text into index tokens.

        Splits on everything that is not a letter or digit, the same way
        the FTS5 unicode61 tokenizer splits indexed text.

        Args:
            text: Input text

        Returns:
            List of tokens
        """
        if not text:
            return []

        return self.token_regex.findall(self.normalize(text))

    def is_blank(self, text: str) -> bool:
        """Return True for empty or whitespace-only text."""
        return not text or not text.strip()

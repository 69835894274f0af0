"""Keyword extraction for indexing and querying.

Text is normalized into lowercase tokens with surrounding punctuation removed.
A dot between two letters or digits stays inside its token, so dotted method
identifiers such as ``a.method.name`` and versions such as ``v1.2`` survive as
single keywords. Any other punctuation separates tokens.
"""

import re
from typing import List, Optional, Set

# Letters and digits; underscore counts as punctuation.
_ALNUM = r"[^\W_]"

TOKEN_PATTERN = re.compile(rf"{_ALNUM}+(?:\.{_ALNUM}+)*")
EDGE_PUNCTUATION_PATTERN = re.compile(r"^[\W_]+|[\W_]+$")
WHITESPACE_PATTERN = re.compile(r"\s+")


class KeywordExtractor:
    """Splits free text into searchable keywords."""

    def as_set(self, text: Optional[str]) -> Set[str]:
        """Return the distinct keywords found in ``text``.

        Args:
            text: Free text such as a service or method description, or None

        Returns:
            Set[str]: Lowercase keywords, empty for empty or punctuation-only text
        """
        if not text:
            return set()

        keywords = set()
        for chunk in text.split():
            keywords.update(match.lower() for match in TOKEN_PATTERN.findall(chunk))
        return keywords

    def split(self, text: str, strip_punctuation: bool) -> List[str]:
        """Split text on whitespace preserving order and empty fragments.

        Used while a query is being typed: a trailing empty fragment marks
        that the last word is complete. Case is never changed.

        Args:
            text: Query text
            strip_punctuation: Trim leading and trailing punctuation from
                every fragment; fragments that become empty are kept

        Returns:
            List[str]: Fragments in input order, empty list for empty input
        """
        if not text:
            return []

        fragments = WHITESPACE_PATTERN.split(text)
        if strip_punctuation:
            fragments = [self.strip_punctuation(fragment) for fragment in fragments]
        return fragments

    @staticmethod
    def strip_punctuation(fragment: str) -> str:
        """Remove leading and trailing runs of non-alphanumeric characters."""
        return EDGE_PUNCTUATION_PATTERN.sub("", fragment)

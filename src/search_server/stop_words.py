"""
Stop word set owned by a single search server instance.

Stop words are excluded from indexing and from query interpretation. Adding
stop words only affects documents and queries processed afterwards; entries
already in the inverted index are never re-filtered.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Set

from .tokenizer import split_into_words

logger = logging.getLogger(__name__)


class StopWordSet:
    """Set of words ignored by indexing and query parsing."""

    def __init__(self, text: Optional[str] = None):
        self._words: Set[str] = set()
        if text is not None:
            self.add_words(text)

    def add_words(self, text: str) -> None:
        """
        Tokenize text and add every resulting word to the set.

        Args:
            text: Space separated stop words, e.g. "in the and"
        """
        words = split_into_words(text)
        self._words.update(words)
        logger.debug(f"Stop words updated: +{len(words)} words, {len(self._words)} total")

    def contains(self, word: str) -> bool:
        return word in self._words

    def filter(self, words: Iterable[str]) -> List[str]:
        """Drop stop words, preserving the order of the remaining words."""
        return [word for word in words if word not in self._words]

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __len__(self) -> int:
        return len(self._words)

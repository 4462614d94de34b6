"""
Query parsing: raw query text -> plus-words and minus-words.

Query syntax:
- Words are separated by single spaces (same tokenizer as documents)
- A word prefixed with "-" is a minus-word: documents containing it are excluded
- Stop words are dropped, whether or not they carry a minus sign
- Duplicates collapse (both word groups are sets)

Examples:
    "cat city"       -> plus={"cat", "city"}, minus={}
    "cat -city"      -> plus={"cat"}, minus={"city"}
    "cat -"          -> InvalidQueryError
"""

import logging
from dataclasses import dataclass, field
from typing import Set

from .errors import InvalidQueryError
from .stop_words import StopWordSet
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass
class QueryWord:
    data: str
    is_minus: bool
    is_stop: bool


@dataclass
class Query:
    """Parsed query"""
    plus_words: Set[str] = field(default_factory=set)
    minus_words: Set[str] = field(default_factory=set)


class QueryParser:
    """Turns raw query text into a Query using the owning server's stop words."""

    def __init__(self, stop_words: StopWordSet):
        self.stop_words = stop_words

    def parse_word(self, text: str) -> QueryWord:
        is_minus = False
        if text.startswith(MINUS_PREFIX):
            is_minus = True
            text = text[len(MINUS_PREFIX):]
            if not text:
                raise InvalidQueryError("Query contains a bare minus sign")
        return QueryWord(data=text, is_minus=is_minus, is_stop=text in self.stop_words)

    def parse(self, text: str) -> Query:
        """
        Parse raw query text.

        Args:
            text: Raw query, e.g. "fluffy cat -dog"

        Returns:
            Query with plus_words and minus_words

        Raises:
            InvalidQueryError: A word consists of the minus sign only
        """
        query = Query()
        for word in split_into_words(text):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)

        logger.debug(
            f"Parsed query {text!r}: plus={sorted(query.plus_words)}, minus={sorted(query.minus_words)}"
        )
        return query

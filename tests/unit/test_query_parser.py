"""
Unit tests for plus/minus query parsing.
"""

import pytest

from src.search_server.errors import InvalidArgumentError, InvalidQueryError
from src.search_server.query import Query, QueryParser
from src.search_server.stop_words import StopWordSet


@pytest.fixture
def parser():
    return QueryParser(StopWordSet("in the"))


class TestQueryParser:
    """Query text -> Query"""

    def test_plus_words(self, parser):
        query = parser.parse("cat city")
        assert query == Query(plus_words={"cat", "city"}, minus_words=set())

    def test_minus_words(self, parser):
        query = parser.parse("cat -city")
        assert query.plus_words == {"cat"}
        assert query.minus_words == {"city"}

    def test_duplicates_collapse(self, parser):
        query = parser.parse("cat cat -dog -dog")
        assert query.plus_words == {"cat"}
        assert query.minus_words == {"dog"}

    def test_stop_words_dropped(self, parser):
        query = parser.parse("cat in the city")
        assert query.plus_words == {"cat", "city"}

    def test_minus_stop_word_dropped(self, parser):
        """A stop word with a minus sign counts neither as plus nor as minus"""
        query = parser.parse("cat -in")
        assert query.plus_words == {"cat"}
        assert query.minus_words == set()

    def test_same_word_plus_and_minus(self, parser):
        query = parser.parse("cat -cat")
        assert query.plus_words == {"cat"}
        assert query.minus_words == {"cat"}

    def test_only_first_minus_is_stripped(self, parser):
        query = parser.parse("--cat")
        assert query.minus_words == {"-cat"}

    def test_inner_minus_is_part_of_word(self, parser):
        query = parser.parse("e-mail")
        assert query.plus_words == {"e-mail"}

    def test_bare_minus_is_invalid(self, parser):
        with pytest.raises(InvalidQueryError):
            parser.parse("cat -")

    def test_invalid_query_is_invalid_argument(self, parser):
        """Callers may catch the generic error kind"""
        with pytest.raises(InvalidArgumentError):
            parser.parse("-")
        with pytest.raises(ValueError):
            parser.parse("-")

    def test_empty_query_is_empty_plus_word(self, parser):
        assert parser.parse("").plus_words == {""}

    def test_empty_word_can_be_a_stop_word(self):
        parser = QueryParser(StopWordSet("in  the"))
        assert parser.parse("cat  city").plus_words == {"cat", "city"}

    def test_parser_sees_later_stop_words(self):
        stop_words = StopWordSet()
        parser = QueryParser(stop_words)
        assert parser.parse("cat in").plus_words == {"cat", "in"}

        stop_words.add_words("in")
        assert parser.parse("cat in").plus_words == {"cat"}

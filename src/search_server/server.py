"""
SearchServer - public facade over the indexing and ranking engine.

Owns every piece of state (stop words, inverted index, document store), so
independent instances never interfere with each other. Not thread-safe: callers
sharing one instance across threads must serialize all calls (see src/main.py).
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .document import Document, DocumentData, DocumentStatus
from .errors import NotFoundError, SearchServerError
from .filters import FilterArg, resolve_filter
from .index import InvertedIndex
from .matcher import DocumentMatcher
from .query import QueryParser
from .ranking import MAX_RESULT_DOCUMENT_COUNT, RankingEngine
from .stop_words import StopWordSet

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory TF-IDF document search engine.

    Example:
        >>> server = SearchServer("in the")
        >>> server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        >>> [doc.id for doc in server.find_top_documents("cat")]
        [42]
    """

    def __init__(
        self,
        stop_words_text: Optional[str] = None,
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    ):
        """
        Args:
            stop_words_text: Initial space separated stop words, None for none.
                Any string, even an empty one, is added like set_stop_words
            max_result_document_count: Upper bound on find_top_documents results
        """
        self._stop_words = StopWordSet(stop_words_text)
        self._index = InvertedIndex(self._stop_words)
        self._query_parser = QueryParser(self._stop_words)
        self._ranking = RankingEngine(self._index, max_result_document_count)
        self._matcher = DocumentMatcher(self._index)

    @property
    def max_result_document_count(self) -> int:
        return self._ranking.max_result_document_count

    def set_stop_words(self, text: str) -> None:
        """Add stop words. Applies to documents and queries processed from now on."""
        self._stop_words.add_words(text)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int]
    ) -> None:
        """
        Index a document.

        Raises:
            InvalidArgumentError: Empty ratings, negative id or unknown status
            AlreadyExistsError: Duplicate document id
        """
        try:
            self._index.add_document(document_id, document, status, ratings)
        except SearchServerError as e:
            logger.warning(f"Rejected document {document_id}: {e}")
            raise

    def find_top_documents(self, raw_query: str, document_filter: FilterArg = None) -> List[Document]:
        """
        Find the most relevant documents for a query.

        Args:
            raw_query: Query text with optional "-minus" words
            document_filter: One of
                - None: only ACTUAL documents
                - DocumentStatus: only documents with that status
                - callable(document_id, status, rating) -> bool
                - a FilterSpec instance

        Returns:
            Up to max_result_document_count Documents, best first

        Raises:
            InvalidQueryError: Malformed query word
        """
        spec = resolve_filter(document_filter)
        query = self._query_parser.parse(raw_query)
        return self._ranking.find_top_documents(query, spec)

    def get_document_count(self) -> int:
        return self._index.get_document_count()

    def get_document(self, document_id: int) -> DocumentData:
        """
        Averaged rating and status of an indexed document.

        Raises:
            NotFoundError: Unknown document id
        """
        return self._index.get_document(document_id)

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        List the query's plus-words present in one document.

        Returns:
            (matched words, document status); words are empty when a
            minus-word occurs in the document

        Raises:
            NotFoundError: Unknown document id
            InvalidQueryError: Malformed query word
        """
        if not self._index.has_document(document_id):
            raise NotFoundError(document_id)
        query = self._query_parser.parse(raw_query)
        return self._matcher.match(query, document_id)

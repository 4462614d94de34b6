"""
Per-document query matching.
"""

import logging
from typing import List, Tuple

from .document import DocumentStatus
from .index import InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)


class DocumentMatcher:
    """Reports which plus-words of a query occur in one document."""

    def __init__(self, index: InvertedIndex):
        self.index = index

    def match(self, query: Query, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Match a parsed query against a single document.

        Args:
            query: Parsed query
            document_id: Id of an indexed document

        Returns:
            (matched plus-words in lexicographic order, document status).
            The word list is empty if any minus-word occurs in the document.

        Raises:
            NotFoundError: Unknown document id
        """
        status = self.index.get_document(document_id).status

        for word in query.minus_words:
            if document_id in self.index.postings(word):
                logger.debug(f"Document {document_id} excluded by minus-word {word!r}")
                return [], status

        matched_words = [
            word for word in sorted(query.plus_words)
            if document_id in self.index.postings(word)
        ]
        return matched_words, status

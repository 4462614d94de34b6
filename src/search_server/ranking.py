"""
TF-IDF ranking over the inverted index.

Formula:
    relevance(doc) = sum over plus-words w present in doc of tf(w, doc) * idf(w)
    idf(w) = ln(N / df(w))

Where:
    tf(w, doc) = occurrences of w in doc / non-stop words in doc
    N = total number of indexed documents (regardless of any filter)
    df(w) = number of documents containing w

Ordering:
    Relevance descending. Two relevances closer than RELEVANCE_EPSILON are
    considered equal and ordered by rating descending instead. The comparison
    is pairwise, exactly as below, and results are truncated to the configured
    maximum afterwards.
"""

import logging
import math
from functools import cmp_to_key
from typing import Dict, List

from .document import Document
from .filters import FilterSpec
from .index import InvertedIndex
from .query import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6


def compare_documents(lhs: Document, rhs: Document) -> int:
    """
    Ordering comparator for ranked documents (negative = lhs goes first).

    Examples:
        >>> compare_documents(Document(1, 0.5, 1), Document(2, 0.1, 9))
        -1
        >>> compare_documents(Document(1, 0.5, 1), Document(2, 0.5 + 1e-7, 9))
        1
    """
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        if lhs.rating > rhs.rating:
            return -1
        if lhs.rating < rhs.rating:
            return 1
        return 0
    return -1 if lhs.relevance > rhs.relevance else 1


class RankingEngine:
    """
    Scores, filters, sorts and truncates candidate documents.

    Reads the inverted index, never mutates it.
    """

    def __init__(self, index: InvertedIndex, max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT):
        if max_result_document_count < 1:
            raise ValueError(
                f"max_result_document_count must be positive, got {max_result_document_count}"
            )
        self.index = index
        self.max_result_document_count = max_result_document_count

    def compute_inverse_document_freq(self, word: str) -> float:
        """IDF of an indexed word. The word must have at least one posting."""
        return math.log(self.index.get_document_count() / self.index.document_frequency(word))

    def score_all(self, query: Query, document_filter: FilterSpec) -> List[Document]:
        """
        Compute relevance for every document matching the query.

        Args:
            query: Parsed query
            document_filter: Filter evaluated for every plus-word posting

        Returns:
            Unsorted Documents in ascending id order. Documents containing any
            minus-word are excluded unconditionally.
        """
        document_to_relevance: Dict[int, float] = {}

        for word in sorted(query.plus_words):
            if word not in self.index:
                continue
            inverse_document_freq = self.compute_inverse_document_freq(word)
            for document_id, term_freq in self.index.postings(word).items():
                data = self.index.get_document(document_id)
                if document_filter.accepts(document_id, data.status, data.rating):
                    document_to_relevance[document_id] = (
                        document_to_relevance.get(document_id, 0.0) + term_freq * inverse_document_freq
                    )

        for word in query.minus_words:
            if word not in self.index:
                continue
            for document_id in self.index.postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(
                id=document_id,
                relevance=relevance,
                rating=self.index.get_document(document_id).rating,
            )
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def find_top_documents(self, query: Query, document_filter: FilterSpec) -> List[Document]:
        """
        Rank matching documents and keep the best ones.

        Returns:
            At most max_result_document_count Documents, best first
        """
        matched_documents = self.score_all(query, document_filter)
        matched_documents.sort(key=cmp_to_key(compare_documents))
        top_documents = matched_documents[:self.max_result_document_count]

        logger.debug(
            f"Ranked {len(matched_documents)} matching documents, "
            f"returning top {len(top_documents)} (filter={document_filter!r})"
        )
        return top_documents

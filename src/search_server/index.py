"""
Inverted index and document store.

The inverted index maps every term to its posting list:

    {
        "cat": {1: 0.25},
        "city": {1: 0.25, 2: 0.25},
        ...
    }

where each value is the term frequency of the term in that document
(occurrences / number of non-stop words in the document). The document store
maps document ids to their averaged rating and status.

Both structures are append-only: documents are never updated or removed.
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from .document import DocumentData, DocumentStatus
from .errors import AlreadyExistsError, InvalidArgumentError, NotFoundError
from .stop_words import StopWordSet
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)


def compute_average_rating(ratings: Sequence[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero.

    Examples:
        >>> compute_average_rating([1, 2, 3])
        2
        >>> compute_average_rating([-1, -2])
        -1
    """
    if not ratings:
        raise InvalidArgumentError("Ratings must not be empty")
    rating_sum = sum(ratings)
    count = len(ratings)
    average = abs(rating_sum) // count
    return average if rating_sum >= 0 else -average


class DocumentStore:
    """Document id -> DocumentData mapping"""

    def __init__(self):
        self._documents: Dict[int, DocumentData] = {}

    def add(self, document_id: int, data: DocumentData) -> None:
        if document_id in self._documents:
            raise AlreadyExistsError(document_id)
        self._documents[document_id] = data

    def get(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise NotFoundError(document_id) from None

    def ids(self) -> List[int]:
        return sorted(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)


class InvertedIndex:
    """
    Term -> {document id -> term frequency} index plus the document store.

    Owns the stop word set used at indexing time. Stop words configured after a
    document was added do not affect that document's postings.
    """

    def __init__(self, stop_words: StopWordSet):
        self.stop_words = stop_words
        self.documents = DocumentStore()
        self._word_to_document_freqs: Dict[str, Dict[int, float]] = defaultdict(dict)

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int]
    ) -> None:
        """
        Index a document.

        All preconditions are checked before any state is touched, so a failed
        call leaves the index and the store exactly as they were.

        Args:
            document_id: Externally assigned, non-negative, unique id
            document: Raw document text
            status: Lifecycle status
            ratings: Non-empty list of integer ratings

        Raises:
            InvalidArgumentError: Negative id, bad status or empty ratings
            AlreadyExistsError: Id already indexed
        """
        if document_id < 0:
            raise InvalidArgumentError(f"Document id must be non-negative, got {document_id}")
        if not isinstance(status, DocumentStatus):
            raise InvalidArgumentError(f"Unknown document status: {status!r}")
        if document_id in self.documents:
            raise AlreadyExistsError(document_id)
        rating = compute_average_rating(ratings)

        words = self.stop_words.filter(split_into_words(document))
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                postings = self._word_to_document_freqs[word]
                postings[document_id] = postings.get(document_id, 0.0) + inv_word_count

        self.documents.add(document_id, DocumentData(rating=rating, status=status))

        logger.debug(
            f"Indexed document {document_id}: {len(words)} words, "
            f"{len(set(words))} unique terms, rating={rating}, status={status.name}"
        )

    def get_document_count(self) -> int:
        return len(self.documents)

    def has_document(self, document_id: int) -> bool:
        return document_id in self.documents

    def get_document(self, document_id: int) -> DocumentData:
        """
        Rating and status of an indexed document.

        Raises:
            NotFoundError: Unknown document id
        """
        return self.documents.get(document_id)

    def document_ids(self) -> List[int]:
        """Indexed document ids, ascending"""
        return self.documents.ids()

    def postings(self, word: str) -> Dict[int, float]:
        """
        Posting list for a word.

        Returns:
            {document_id: term_frequency}, empty if the word is not indexed
        """
        return self._word_to_document_freqs.get(word, {})

    def document_frequency(self, word: str) -> int:
        """Number of documents containing the word"""
        return len(self.postings(word))

    def __contains__(self, word: object) -> bool:
        return word in self._word_to_document_freqs

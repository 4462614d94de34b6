"""
Document filters for ranking.

A filter decides, per candidate document, whether its relevance is accumulated.
Three variants exist:

- Predicate(fn):           fn(document_id, status, rating) -> bool
- StatusEquals(status):    status == value
- Default():               status == DocumentStatus.ACTUAL

resolve_filter() turns whatever the caller passed to find_top_documents
(callable, DocumentStatus, FilterSpec or None) into one of these variants.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .document import DocumentStatus
from .errors import InvalidArgumentError

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]


class FilterSpec(ABC):
    """Base class for document filters"""

    @abstractmethod
    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        """
        Decide whether a document takes part in ranking.

        Args:
            document_id: Candidate document id
            status: Stored document status
            rating: Stored average rating

        Returns:
            True if the document's relevance should be accumulated
        """
        pass


@dataclass(frozen=True)
class Predicate(FilterSpec):
    """Arbitrary caller-supplied predicate"""
    fn: DocumentPredicate

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return bool(self.fn(document_id, status, rating))


@dataclass(frozen=True)
class StatusEquals(FilterSpec):
    """Accept documents with exactly this status"""
    status: DocumentStatus

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == self.status


@dataclass(frozen=True)
class Default(FilterSpec):
    """Accept ACTUAL documents only"""

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == DocumentStatus.ACTUAL


FilterArg = Optional[Union[FilterSpec, DocumentStatus, DocumentPredicate]]


def resolve_filter(document_filter: FilterArg = None) -> FilterSpec:
    """
    Normalize a find_top_documents filter argument.

    Examples:
        >>> resolve_filter()
        Default()
        >>> resolve_filter(DocumentStatus.BANNED)
        StatusEquals(status=<DocumentStatus.BANNED: 'BANNED'>)
    """
    if document_filter is None:
        return Default()
    if isinstance(document_filter, FilterSpec):
        return document_filter
    if isinstance(document_filter, DocumentStatus):
        return StatusEquals(document_filter)
    if callable(document_filter):
        return Predicate(document_filter)
    raise InvalidArgumentError(f"Unsupported document filter: {document_filter!r}")

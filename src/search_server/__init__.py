"""
In-memory TF-IDF document search engine.

Components:
- tokenizer: Single-space word splitting shared by documents and queries
- stop_words: Per-instance stop word set
- index: Inverted index (term -> {doc_id: tf}) and document store
- query: Plus/minus word query parsing
- filters: Status / predicate document filters
- ranking: TF-IDF scoring, tolerance-based ordering, top-k truncation
- matcher: Per-document plus-word matching
- server: SearchServer facade owning all of the above

Key properties:
- Stop words apply only to documents and queries processed after they are set
- Minus-words exclude documents unconditionally
- Relevances closer than 1e-6 are ordered by rating
"""

from .document import Document, DocumentData, DocumentStatus
from .errors import (
    AlreadyExistsError,
    InvalidArgumentError,
    InvalidQueryError,
    NotFoundError,
    SearchServerError,
)
from .filters import Default, FilterSpec, Predicate, StatusEquals, resolve_filter
from .ranking import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from .server import SearchServer
from .tokenizer import split_into_words

__all__ = [
    "SearchServer",
    "Document",
    "DocumentData",
    "DocumentStatus",
    "FilterSpec",
    "Predicate",
    "StatusEquals",
    "Default",
    "resolve_filter",
    "split_into_words",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_EPSILON",
    "SearchServerError",
    "InvalidArgumentError",
    "InvalidQueryError",
    "AlreadyExistsError",
    "NotFoundError",
]

"""
Document model: lifecycle status, stored document data and ranked results.
"""

from dataclasses import dataclass
from enum import Enum


class DocumentStatus(Enum):
    """Lifecycle status of an indexed document."""
    ACTUAL = "ACTUAL"
    IRRELEVANT = "IRRELEVANT"
    BANNED = "BANNED"
    REMOVED = "REMOVED"


@dataclass(frozen=True)
class DocumentData:
    """Per-document data kept in the document store"""
    rating: int               # Truncating mean of the ratings given on insert
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """Single ranked search result"""
    id: int
    relevance: float    # Sum of TF x IDF over matched plus-words
    rating: int

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"

"""
Search server exceptions.

Every error is raised synchronously where the violation is detected. Documents
excluded by minus-words or rejected by a filter are not errors, they simply do
not appear in the results.
"""


class SearchServerError(Exception):
    """Base class for all search server errors"""


class InvalidArgumentError(SearchServerError, ValueError):
    """Argument violates a precondition (e.g. empty ratings list)"""


class InvalidQueryError(InvalidArgumentError):
    """Query text contains a malformed word (e.g. a bare minus sign)"""


class AlreadyExistsError(SearchServerError):
    """Document id is already present in the document store"""

    def __init__(self, document_id: int):
        super().__init__(f"Document {document_id} already exists")
        self.document_id = document_id


class NotFoundError(SearchServerError, KeyError):
    """Document id is unknown to the document store"""

    def __init__(self, document_id: int):
        super().__init__(f"Document {document_id} not found")
        self.document_id = document_id

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])

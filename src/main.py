"""
Search Server - FastAPI application exposing the in-memory search engine

Endpoints:
- Stop word configuration
- Document indexing (id, text, status, ratings)
- TF-IDF search with minus-words and status / rating filters
- Per-document query matching

Concurrency:
- One SearchServer instance per process, created at startup
- The engine is not thread-safe: every call goes through ENGINE_LOCK
- State lives in memory only and is lost on restart
"""

import logging
import threading
from contextlib import asynccontextmanager
from datetime import datetime
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from src.config import (
    get_log_file,
    get_log_level,
    get_max_result_document_count,
    get_port,
    get_stop_words,
    load_environment,
)
from src.logging_config import setup_logging

from .search_server import (
    AlreadyExistsError,
    DocumentStatus,
    InvalidArgumentError,
    NotFoundError,
    Predicate,
    SearchServer,
    SearchServerError,
)
from .search_server.filters import FilterArg

# Load .env.local first (highest priority), then .env as fallback
load_environment()

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"

# Global instances
search_server: Optional[SearchServer] = None
ENGINE_LOCK = threading.Lock()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and cleanup the engine"""
    global search_server

    setup_logging(log_file=get_log_file(), console_level=get_log_level())

    max_results = get_max_result_document_count()
    search_server = SearchServer(
        stop_words_text=get_stop_words(),
        max_result_document_count=max_results,
    )
    logger.info(f"Search server initialized (max_result_document_count={max_results})")

    yield

    logger.info("Shutting down...")
    search_server = None


app = FastAPI(
    title="Search Server API",
    description="In-memory TF-IDF document search with stop words, minus-words and status filters",
    version=APP_VERSION,
    lifespan=lifespan,
)


def get_search_server() -> SearchServer:
    if search_server is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Search server is not initialized",
        )
    return search_server


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    document_count: int
    started_at: str
    uptime_seconds: float


class StopWordsRequest(BaseModel):
    text: str = Field(..., description="Space separated stop words")


class MessageResponse(BaseModel):
    message: str


class AddDocumentRequest(BaseModel):
    document_id: int = Field(..., ge=0, description="Unique document id")
    text: str = Field(..., description="Document text (words separated by single spaces)")
    status: DocumentStatus = Field(default=DocumentStatus.ACTUAL, description="Lifecycle status")
    ratings: List[int] = Field(..., description="User ratings, averaged with truncation")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "document_id": 42,
            "text": "fluffy cat with expressive eyes",
            "status": "ACTUAL",
            "ratings": [5, -12, 2, 1],
        }
    })


class AddDocumentResponse(BaseModel):
    document_id: int
    rating: int
    status: DocumentStatus


class DocumentCountResponse(BaseModel):
    document_count: int


class SearchRequest(BaseModel):
    query: str = Field(..., description="Query words; prefix a word with '-' to exclude documents containing it")
    status: Optional[DocumentStatus] = Field(
        default=None,
        description="Only return documents with this status (default: ACTUAL)"
    )
    min_rating: Optional[int] = Field(
        default=None,
        description="Only return documents whose average rating is at least this value"
    )

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "query": "fluffy groomed cat -dog",
            "status": "ACTUAL",
            "min_rating": 2,
        }
    })

    def to_filter(self) -> FilterArg:
        """
        Build the document filter for this request.

        - neither status nor min_rating: None (server default, ACTUAL only)
        - status only: the status itself
        - min_rating: predicate on rating and status (ACTUAL unless given)
        """
        if self.min_rating is None:
            return self.status
        required_status = self.status or DocumentStatus.ACTUAL
        min_rating = self.min_rating
        return Predicate(
            lambda document_id, document_status, rating: (
                document_status == required_status and rating >= min_rating
            )
        )


class SearchResultItem(BaseModel):
    document_id: int
    relevance: float
    rating: int


class SearchResponse(BaseModel):
    query: str
    results: List[SearchResultItem]
    total: int


class MatchRequest(BaseModel):
    query: str = Field(..., description="Query words, minus-words allowed")


class MatchResponse(BaseModel):
    document_id: int
    matched_words: List[str]
    status: DocumentStatus


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Search Server API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health(server: SearchServer = Depends(get_search_server)):
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    with ENGINE_LOCK:
        document_count = server.get_document_count()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        document_count=document_count,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/stop-words", response_model=MessageResponse)
async def set_stop_words(request: StopWordsRequest, server: SearchServer = Depends(get_search_server)):
    """
    Add stop words.

    Stop words only affect documents and queries processed afterwards;
    already indexed documents keep their postings.
    """
    with ENGINE_LOCK:
        server.set_stop_words(request.text)
    return MessageResponse(message="Stop words updated")


@app.post("/v1/documents", response_model=AddDocumentResponse, status_code=status.HTTP_201_CREATED)
async def add_document(request: AddDocumentRequest, server: SearchServer = Depends(get_search_server)):
    """
    Index a document.

    Errors:
    - 400: empty ratings
    - 409: document id already indexed
    """
    with ENGINE_LOCK:
        server.add_document(request.document_id, request.text, request.status, request.ratings)
        document = server.get_document(request.document_id)
        document_count = server.get_document_count()

    logger.info(f"Document {request.document_id} indexed ({document_count} total)")
    return AddDocumentResponse(
        document_id=request.document_id,
        rating=document.rating,
        status=document.status,
    )


@app.get("/v1/documents/count", response_model=DocumentCountResponse)
async def get_document_count(server: SearchServer = Depends(get_search_server)):
    """Number of indexed documents"""
    with ENGINE_LOCK:
        return DocumentCountResponse(document_count=server.get_document_count())


@app.post("/v1/search", response_model=SearchResponse)
async def search(request: SearchRequest, server: SearchServer = Depends(get_search_server)):
    """
    Find the most relevant documents.

    **Query syntax:**
    - `cat city` - documents containing cat and/or city, ranked by TF-IDF
    - `cat -city` - documents containing cat but never city

    **Ordering:** relevance descending; relevances within 1e-6 are ordered by
    rating descending. At most MAX_RESULT_DOCUMENT_COUNT results are returned.

    Errors:
    - 400: malformed query (bare minus sign)
    """
    with ENGINE_LOCK:
        documents = server.find_top_documents(request.query, request.to_filter())

    results = [
        SearchResultItem(document_id=doc.id, relevance=doc.relevance, rating=doc.rating)
        for doc in documents
    ]
    logger.info(f"Query {request.query!r}: {len(results)} results")
    return SearchResponse(query=request.query, results=results, total=len(results))


@app.post("/v1/documents/{document_id}/match", response_model=MatchResponse)
async def match_document(
    document_id: int,
    request: MatchRequest,
    server: SearchServer = Depends(get_search_server)
):
    """
    List the query's plus-words present in a document.

    The list is empty if the document contains any minus-word.

    Errors:
    - 400: malformed query
    - 404: unknown document id
    """
    with ENGINE_LOCK:
        matched_words, document_status = server.match_document(request.query, document_id)

    return MatchResponse(document_id=document_id, matched_words=matched_words, status=document_status)


@app.exception_handler(SearchServerError)
async def search_server_exception_handler(request, exc: SearchServerError):
    """Map engine errors to HTTP status codes"""
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, AlreadyExistsError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, InvalidArgumentError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=get_port(),
    )

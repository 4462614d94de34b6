"""
Console front end for the search server.

Input protocol (stdin):
    line 1:        stop words, space separated
    line 2:        number of documents N
    next 2*N:      document text, then its ratings line ("3 1 2 3")
    remaining:     one query per line

Documents get ids 0..N-1 and status ACTUAL. For every query the matching
documents are printed one per line:

    { document_id = 1, relevance = 0.866434, rating = 5 }

Errors are reported as "ERROR: <message>" and reading continues.

Usage:
    search-server-console < corpus.txt
"""

import logging
import sys
from typing import Optional, TextIO

from .config import get_log_file, get_log_level, get_max_result_document_count, load_environment
from .logging_config import setup_logging
from .search_server import DocumentStatus, SearchServer, SearchServerError
from .utils import parse_ratings, read_line, read_line_with_number

logger = logging.getLogger(__name__)


def load_documents(stream: TextIO, out: TextIO, server: SearchServer) -> int:
    """Read the stop words and document section. Returns the number of documents indexed."""
    server.set_stop_words(read_line(stream))
    document_count = read_line_with_number(stream)

    indexed = 0
    for document_id in range(document_count):
        document = read_line(stream)
        try:
            ratings = parse_ratings(read_line(stream))
            server.add_document(document_id, document, DocumentStatus.ACTUAL, ratings)
            indexed += 1
        except SearchServerError as e:
            out.write(f"ERROR: document {document_id}: {e}\n")

    logger.info(f"Indexed {indexed}/{document_count} documents")
    return indexed


def run_console(stream: TextIO, out: TextIO, server: Optional[SearchServer] = None) -> SearchServer:
    """
    Run the console protocol over the given streams.

    Args:
        stream: Input stream (stdin in production)
        out: Output stream for results and errors
        server: Engine to populate; a fresh one is created if omitted

    Returns:
        The populated server
    """
    if server is None:
        server = SearchServer(max_result_document_count=get_max_result_document_count())

    try:
        load_documents(stream, out, server)
    except SearchServerError as e:
        out.write(f"ERROR: {e}\n")
        return server

    for line in stream:
        query = line.rstrip("\r\n")
        if not query:
            continue
        try:
            for document in server.find_top_documents(query):
                out.write(f"{document}\n")
        except SearchServerError as e:
            out.write(f"ERROR: query {query!r}: {e}\n")

    return server


def main() -> None:
    load_environment()
    setup_logging(log_file=get_log_file(), console_level=get_log_level())
    run_console(sys.stdin, sys.stdout)


if __name__ == "__main__":
    main()

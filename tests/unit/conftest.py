"""Unit test configuration - shared search server fixtures"""

import logging

import pytest

from src.search_server import DocumentStatus, SearchServer


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """
    Keep unit tests independent of the developer's shell and .env files.

    LOG_FILE="" disables the rotating file handler, so no logs/ directory is
    created while testing the API and console.
    """
    for name in ("MAX_RESULT_DOCUMENT_COUNT", "SEARCH_SERVER_STOP_WORDS", "LOG_LEVEL", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_FILE", "")


@pytest.fixture
def ratings():
    """Ratings used by most fixtures (average = 2)"""
    return [1, 2, 3]


@pytest.fixture
def server():
    """Empty search server without stop words"""
    return SearchServer()


@pytest.fixture
def cat_corpus_server(ratings):
    """
    Five ACTUAL documents with stop words "in the".

    Each document has 4 non-stop words; progressively fewer of them are shared
    with the query "cat city play match", so document 1 ranks first with
    relevance 0.25 * (ln 5 + ln 5/2 + ln 5/3 + ln 5/4) ~ 0.8149244548.
    """
    server = SearchServer("in the")
    server.add_document(1, "cat in the city play match", DocumentStatus.ACTUAL, ratings)
    server.add_document(2, "cat1 in the city play match", DocumentStatus.ACTUAL, ratings)
    server.add_document(3, "cat1 in the city2 play match", DocumentStatus.ACTUAL, ratings)
    server.add_document(4, "cat1 in the city2 play3 match", DocumentStatus.ACTUAL, ratings)
    server.add_document(5, "cat1 in the city2 play3 match4", DocumentStatus.ACTUAL, ratings)
    return server


@pytest.fixture
def mixed_status_server(ratings):
    """Same corpus as cat_corpus_server, one document per status plus an extra ACTUAL one"""
    server = SearchServer("in the")
    server.add_document(1, "cat in the city play match", DocumentStatus.ACTUAL, ratings)
    server.add_document(2, "cat1 in the city play match", DocumentStatus.BANNED, ratings)
    server.add_document(3, "cat1 in the city2 play match", DocumentStatus.IRRELEVANT, ratings)
    server.add_document(4, "cat1 in the city2 play3 match", DocumentStatus.REMOVED, ratings)
    server.add_document(5, "cat1 in the city2 play3 match4", DocumentStatus.ACTUAL, ratings)
    return server


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging (called by the API lifespan and tests) replaces root handlers; restore them"""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)

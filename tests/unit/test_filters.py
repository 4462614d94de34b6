"""
Unit tests for document filter variants.
"""

import pytest

from src.search_server.document import DocumentStatus
from src.search_server.errors import InvalidArgumentError
from src.search_server.filters import Default, Predicate, StatusEquals, resolve_filter


class TestFilterVariants:
    """accepts() semantics per variant"""

    def test_default_accepts_actual_only(self):
        spec = Default()
        assert spec.accepts(1, DocumentStatus.ACTUAL, 0)
        for status in (DocumentStatus.IRRELEVANT, DocumentStatus.BANNED, DocumentStatus.REMOVED):
            assert not spec.accepts(1, status, 0)

    def test_status_equals(self):
        spec = StatusEquals(DocumentStatus.BANNED)
        assert spec.accepts(1, DocumentStatus.BANNED, 0)
        assert not spec.accepts(1, DocumentStatus.ACTUAL, 0)

    def test_predicate_receives_all_arguments(self):
        calls = []

        def predicate(document_id, status, rating):
            calls.append((document_id, status, rating))
            return rating > 2

        spec = Predicate(predicate)
        assert spec.accepts(7, DocumentStatus.REMOVED, 3)
        assert not spec.accepts(8, DocumentStatus.ACTUAL, 1)
        assert calls == [(7, DocumentStatus.REMOVED, 3), (8, DocumentStatus.ACTUAL, 1)]

    def test_predicate_result_coerced_to_bool(self):
        assert Predicate(lambda document_id, status, rating: document_id).accepts(1, DocumentStatus.ACTUAL, 0) is True


class TestResolveFilter:
    """Normalization of find_top_documents filter arguments"""

    def test_none_is_default(self):
        assert resolve_filter(None) == Default()

    def test_status_is_status_equals(self):
        assert resolve_filter(DocumentStatus.REMOVED) == StatusEquals(DocumentStatus.REMOVED)

    def test_callable_is_predicate(self):
        def predicate(document_id, status, rating):
            return True

        assert resolve_filter(predicate) == Predicate(predicate)

    def test_filter_spec_passes_through(self):
        spec = StatusEquals(DocumentStatus.ACTUAL)
        assert resolve_filter(spec) is spec

    def test_unsupported_value(self):
        with pytest.raises(InvalidArgumentError):
            resolve_filter("ACTUAL")

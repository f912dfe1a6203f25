"""Tests for the error hierarchy — codes, categories and REST envelope."""

from catalog.core.errors import (
    DataAccessFailure, DatabaseError, ErrorCategory, ErrorContext,
    ErrorSeverity, LibraryError, MalformedRecordError,
)


def test_data_access_failures_share_one_base():
    assert issubclass(DatabaseError, DataAccessFailure)
    assert issubclass(MalformedRecordError, DataAccessFailure)
    assert issubclass(DataAccessFailure, LibraryError)


def test_database_error_message_names_operation():
    err = DatabaseError("Connection refused", "query")
    assert err.message == "Database query failed: Connection refused"
    assert err.operation == "query"
    assert err.code == "DATABASE_ERROR"
    assert err.http_status == 503
    assert err.severity == ErrorSeverity.CRITICAL


def test_malformed_record_error_keeps_field():
    err = MalformedRecordError("bad date", "date_of_birth")
    assert err.field == "date_of_birth"
    assert err.category == ErrorCategory.DATA_INTEGRITY
    assert err.code == "MALFORMED_RECORD"


def test_to_response_envelope():
    err = DataAccessFailure(
        "Author query failed", context=ErrorContext(path="/api/v1/authors"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "DATA_ACCESS_FAILURE"
    assert body["message"] == "Author query failed"
    assert body["category"] == "database"
    assert body["severity"] == "critical"
    assert body["context"] == {"path": "/api/v1/authors"}
    assert "timestamp" in body

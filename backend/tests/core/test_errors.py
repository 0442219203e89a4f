"""Error Hierarchy: codes, statuses, and the REST envelope."""

from streambase.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity,
    ResourceNotFoundError, StreambaseError, ValidationError,
)


def test_not_found_is_404_with_resource_context():
    err = ResourceNotFoundError("Video", "12")
    assert err.http_status == 404
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Video not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"] == {"resource_type": "Video", "resource_id": "12"}


def test_validation_error_is_400_and_keeps_field():
    err = ValidationError("Missing required field(s): name", field="name")
    assert err.http_status == 400
    assert err.field == "name"
    assert err.to_response()["error"]["code"] == "VALIDATION_ERROR"


def test_database_error_is_critical_500():
    err = DatabaseError("Integrity constraint violated", "query")
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "query"
    assert err.message == "Database query failed: Integrity constraint violated"


def test_all_errors_share_base_class():
    for err in (
        ResourceNotFoundError("User", "1"),
        ValidationError("bad", field="x"),
        DatabaseError("down", "execute"),
    ):
        assert isinstance(err, StreambaseError)
        assert set(err.to_response()["error"]) >= {
            "code", "message", "category", "severity", "timestamp",
        }

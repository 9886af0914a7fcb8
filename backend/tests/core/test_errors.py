"""Error Hierarchy — tests for codes, HTTP status and the REST envelope."""

from app.core.errors import (
    ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidConfigError, PassForgeError, ResourceNotFoundError,
)


def test_invalid_config_is_recoverable_validation_error():
    err = InvalidConfigError("At least one character type must be selected", "include")
    assert isinstance(err, PassForgeError)
    assert err.code == "INVALID_CONFIG"
    assert err.category == ErrorCategory.VALIDATION
    assert err.severity == ErrorSeverity.WARNING
    assert err.http_status == 400
    assert err.field == "include"
    assert str(err) == "At least one character type must be selected"


def test_invalid_config_response_envelope():
    body = InvalidConfigError("bad length", "length").to_response()
    error = body["error"]
    assert error["code"] == "INVALID_CONFIG"
    assert error["message"] == "bad length"
    assert error["category"] == "validation"
    assert error["severity"] == "warning"
    assert error["context"] == {"field": "length", "entry_id": None}
    assert "timestamp" in error


def test_resource_not_found():
    err = ResourceNotFoundError("Password", "abc")
    assert err.http_status == 404
    assert err.message == "Password 'abc' not found"
    assert err.to_response()["error"]["context"]["entry_id"] == "abc"


def test_context_is_preserved():
    ctx = ErrorContext(debug_info={"classes": 0})
    err = InvalidConfigError("empty", "include", context=ctx)
    assert err.context is ctx
    assert ctx.field_name == "include"

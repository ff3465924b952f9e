"""Error Hierarchy — codes, categories and the structured envelope.

Tests cover:
    - Every error derives from PbxGraphError
    - to_dict() carries code, category, severity and context
"""

from pbxgraph.core.errors import (
    AttributeValidationError,
    DuplicateUUIDError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    PbxGraphError,
)


def test_validation_error_shape():
    err = AttributeValidationError(
        "bad value", "project_references", "PBXGroup",
        ErrorContext(owner_uuid="ABC", attribute="project_references", key="ProjectRef"),
    )
    assert isinstance(err, PbxGraphError)
    assert str(err) == "bad value"
    assert err.code == "VALIDATION_ERROR"
    assert err.severity == ErrorSeverity.ERROR
    assert err.value_isa == "PBXGroup"


def test_validation_error_to_dict():
    err = AttributeValidationError(
        "bad value", "refs", context=ErrorContext(key="k"),
    )
    payload = err.to_dict()["error"]
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["category"] == "validation"
    assert payload["context"] == {"owner_uuid": None, "attribute": None, "key": "k"}
    assert "timestamp" in payload


def test_duplicate_uuid_error_is_critical_conflict():
    err = DuplicateUUIDError("0123")
    assert err.category == ErrorCategory.CONFLICT
    assert err.severity == ErrorSeverity.CRITICAL
    assert "0123" in err.message


def test_default_context_is_created():
    assert DuplicateUUIDError("0123").context.timestamp is not None

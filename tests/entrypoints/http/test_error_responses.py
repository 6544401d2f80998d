"""Tests for REST error response models."""

from furnmart.entrypoints.http.error_responses import ErrorDetail, ErrorResponse


def test_simple_error_response() -> None:
    response = ErrorResponse(detail="unknown sort key 'cheapest'", code="VALIDATION_ERROR")

    assert response.model_dump(exclude_none=True) == {
        "detail": "unknown sort key 'cheapest'",
        "code": "VALIDATION_ERROR",
    }


def test_error_response_with_field_errors() -> None:
    response = ErrorResponse(
        detail="Invalid request parameters",
        code="VALIDATION_ERROR",
        errors=[ErrorDetail(field="view_mode", message="Input should be 'grid' or 'list'", code="enum")],
    )

    data = response.model_dump()
    assert data["errors"][0] == {
        "field": "view_mode",
        "message": "Input should be 'grid' or 'list'",
        "code": "enum",
    }


def test_error_response_schema_has_examples() -> None:
    schema = ErrorResponse.model_json_schema()

    assert "examples" in schema
    assert ErrorDetail.model_json_schema()["example"]["field"] == "view_mode"

"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "view_mode",
                "message": "Input should be 'grid' or 'list'",
                "code": "enum",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Error codes for i18n (code field can be used for translation keys)

    Examples:
        Simple error:
            {
                "detail": "unknown filter group 'colour'",
                "code": "VALIDATION_ERROR"
            }

        Validation error with multiple fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "unit_price",
                        "message": "Input should be greater than or equal to 0",
                        "code": "greater_than_equal"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "unknown sort key 'cheapest'", "code": "VALIDATION_ERROR"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "unit_price",
                            "message": "Input should be greater than or equal to 0",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )

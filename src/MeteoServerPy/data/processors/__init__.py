from .request_validator import (
    RequestValidator,
    AVAILABLE_CITIES,
    validate_type,
    validate_city,
    evaluate_request,
)

__all__ = [
    "RequestValidator",
    "AVAILABLE_CITIES",
    "validate_type",
    "validate_city",
    "evaluate_request",
]

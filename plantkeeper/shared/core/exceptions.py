# 📄 File: plantkeeper/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types Plant Keeper uses to say what went wrong
# (for example "the plant name contains digits") instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with error codes,
# error details, and dictionary serialization for reporting.
# 🔗 Dependencies:
# typing, pydantic (ValidationError translation)
# 🔄 Connected Modules / Calls From:
# Plant domain model, event publisher, validators

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError


class PlantCareException(Exception):
    """
    Base exception class for Plant Keeper.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details
            }
        }


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(PlantCareException, ValueError):
    """
    Exception raised for data validation failures.
    Used when a plant attribute or operation argument breaks one of its rules.
    Also a ValueError, so callers can treat it as an invalid argument.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            details=details,
            error_code="VALIDATION_ERROR"
        )

    @property
    def field(self) -> Optional[str]:
        """Name of the offending field, if known."""
        return self.details.get("field")

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        """
        Build a domain validation error from a pydantic one.

        The first reported error becomes the message; every reported
        error is kept under details["errors"].

        Args:
            exc: Pydantic validation error raised by a model

        Returns:
            ValidationError describing the first failure
        """
        errors = exc.errors(include_url=False)
        if not errors:
            return cls(message=str(exc))

        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None

        # ValueErrors raised by our own validators keep their original text
        original = first.get("ctx", {}).get("error")
        message = str(original) if original is not None else first.get("msg", "Validation failed")

        return cls(
            message=message,
            field=field,
            value=first.get("input"),
            constraint=first.get("type"),
            details={
                "errors": [
                    {
                        "field": ".".join(str(part) for part in error.get("loc", ())),
                        "message": str(error.get("ctx", {}).get("error", error.get("msg"))),
                    }
                    for error in errors
                ]
            }
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, PlantCareException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {}
        }
    }


def is_validation_error(exception: Exception) -> bool:
    """
    Check if exception represents a rejected input.

    Args:
        exception: Exception to check

    Returns:
        bool: True for domain or pydantic validation failures
    """
    return isinstance(exception, (ValidationError, PydanticValidationError))

"""
Core utilities package for Plant Keeper.
Provides the exception hierarchy shared by every module.
"""

from .exceptions import (
    PlantCareException,
    ValidationError,
    exception_to_dict,
    is_validation_error,
)

__all__ = [
    "PlantCareException",
    "ValidationError",
    "exception_to_dict",
    "is_validation_error",
]

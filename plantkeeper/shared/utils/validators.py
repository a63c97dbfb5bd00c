# 📄 File: plantkeeper/shared/utils/validators.py

# 🧭 Purpose (Layman Explanation):
# Contains the checkers that make sure plant data makes sense before it is stored,
# like verifying a plant name only has letters or that nobody claims a 300 meter tree.

# 🧪 Purpose (Technical Summary):
# Validation functions for every plant attribute and operation argument. Each returns a
# ValidationResult instead of raising, so the same rules back both the raising model
# validators and the result-returning update path.

# 🔗 Dependencies:
# - math: finite number checks
# - datetime: planting date range checks

# 🔄 Connected Modules / Calls From:
# Used by: Plant domain model (field validators, grow, update)

import math
from datetime import date, datetime
from typing import Any, List, Optional

# Plant name rules
PLANT_NAME_MIN_LENGTH = 2
PLANT_NAME_MAX_LENGTH = 50

# Plant age rules (years)
PLANT_MIN_AGE = 0
PLANT_MAX_AGE = 5000

# Plant height rules (meters), upper bound is the Hyperion redwood record
PLANT_MAX_HEIGHT = 115.7

# Planting date rules
PLANTING_MIN_YEAR = 1900


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None, warnings: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add validation warning"""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Fold another result into this one"""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)
        return self

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"ValidationResult(is_valid={self.is_valid}, errors={self.errors!r})"


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ==============================================================================
# PLANT ATTRIBUTE VALIDATION
# ==============================================================================

def validate_plant_name(name: Any) -> ValidationResult:
    """
    Validate plant name format and content

    The name must be 2-50 characters long and made of letters and spaces only.
    Any Unicode letter counts.

    Args:
        name: Plant name to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not isinstance(name, str) or not name.strip():
        result.add_error("Plant name cannot be empty")
        return result

    if len(name) < PLANT_NAME_MIN_LENGTH or len(name) > PLANT_NAME_MAX_LENGTH:
        result.add_error(
            f"Plant name must be between {PLANT_NAME_MIN_LENGTH} and "
            f"{PLANT_NAME_MAX_LENGTH} characters"
        )
        return result

    if not all(char.isalpha() or char == ' ' for char in name):
        result.add_error("Plant name can only contain letters and spaces")

    return result


def validate_plant_age(age: Any) -> ValidationResult:
    """
    Validate plant age in whole years

    Args:
        age: Age to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not isinstance(age, int) or isinstance(age, bool):
        result.add_error("Plant age must be a whole number of years")
        return result

    if age < PLANT_MIN_AGE or age > PLANT_MAX_AGE:
        result.add_error(
            f"Plant age must be between {PLANT_MIN_AGE} and {PLANT_MAX_AGE} years"
        )

    return result


def validate_plant_height(height: Any) -> ValidationResult:
    """
    Validate plant height in meters

    Args:
        height: Height to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not _is_real_number(height):
        result.add_error("Plant height must be a number")
        return result

    # Written as a negated range so NaN falls out as invalid
    if not (0 < height <= PLANT_MAX_HEIGHT):
        result.add_error(
            f"Plant height must be greater than 0 and at most {PLANT_MAX_HEIGHT} m "
            f"(Hyperion record)"
        )

    return result


def validate_planting_date(planting_date: Any, today: Optional[date] = None) -> ValidationResult:
    """
    Validate the date a plant was planted

    Args:
        planting_date: Date (or datetime) to validate
        today: Reference date, defaults to the current local date; a datetime
            without a reference date is compared with the current time

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not isinstance(planting_date, date):
        result.add_error("Planting date must be a date")
        return result

    if planting_date.year < PLANTING_MIN_YEAR:
        result.add_error(f"Planting date cannot be earlier than {PLANTING_MIN_YEAR}")

    if isinstance(planting_date, datetime):
        if today is None:
            in_future = planting_date > datetime.now(planting_date.tzinfo)
        else:
            in_future = planting_date.date() > today
    else:
        in_future = planting_date > (today or date.today())

    if in_future:
        result.add_error("Planting date cannot be in the future")

    return result


# ==============================================================================
# PLANT OPERATION VALIDATION
# ==============================================================================

def validate_growth_amount(amount: Any) -> ValidationResult:
    """
    Validate a growth increment in meters

    Args:
        amount: Growth amount

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not _is_real_number(amount):
        result.add_error("Growth amount must be a number")
        return result

    if not (amount > 0 and math.isfinite(amount)):
        result.add_error("Growth amount must be greater than 0")

    return result

# 📄 File: plantkeeper/modules/plant_management/domain/models/plant.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "plant" is in Plant Keeper - its name, kind, age, height and planting date -
# and what you can do with it: water it, let it grow, ask how old or mature it is.
# 🧪 Purpose (Technical Summary):
# Domain model for the Plant entity. Every attribute is re-validated on each assignment
# (pydantic validate_assignment); pydantic errors are translated into the domain ValidationError.
# Behaviours return domain events rather than writing to the console.
# 🔗 Dependencies:
# pydantic, datetime, enum, typing, plantkeeper.shared (exceptions, validators, localization,
# formatters, logging), plant domain events
# 🔄 Connected Modules / Calls From:
# Application code embedding plants, plant event handlers, tests

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator
from pydantic import ValidationError as PydanticValidationError

from plantkeeper.shared.core.exceptions import ValidationError
from plantkeeper.shared.utils.formatters import format_plant_number, format_planting_date, format_watering_time
from plantkeeper.shared.utils.localization import translate
from plantkeeper.shared.utils.logging import get_logger
from plantkeeper.shared.utils.validators import (
    ValidationResult,
    validate_growth_amount,
    validate_plant_age,
    validate_plant_height,
    validate_plant_name,
    validate_planting_date,
)

from ..events.plant_events import PlantGrew, PlantWatered

logger = get_logger(__name__)

# Ages (years) separating the age categories
YOUNG_AGE_LIMIT = 2
ADULT_AGE_LIMIT = 10

# A plant older than this is mature
MATURITY_AGE = 5


class PlantType(str, Enum):
    """Plant category enumeration"""
    TREE = "Tree"
    SHRUB = "Shrub"
    FLOWER = "Flower"
    HERB = "Herb"
    GRASS = "Grass"
    SUCCULENT = "Succulent"
    VINE = "Vine"

    def __str__(self) -> str:
        return self.value


class AgeCategory(str, Enum):
    """Age category of a plant"""
    YOUNG = "Young"    # under 2 years
    ADULT = "Adult"    # 2 to 9 years
    OLD = "Old"        # 10 years and more

    @classmethod
    def from_age(cls, age: int) -> "AgeCategory":
        if age < YOUNG_AGE_LIMIT:
            return cls.YOUNG
        if age < ADULT_AGE_LIMIT:
            return cls.ADULT
        return cls.OLD

    def label(self, locale: Optional[str] = None) -> str:
        """Localized category name"""
        return translate(f"plants.age_category.{self.name.lower()}", locale)

    def __str__(self) -> str:
        return self.value


def validate_plant_type(value: Any) -> ValidationResult:
    """Check that a value names one of the PlantType members"""
    result = ValidationResult(True)
    try:
        PlantType(value)
    except ValueError:
        allowed = ", ".join(member.value for member in PlantType)
        result.add_error(f"Invalid plant type. Must be one of: {allowed}")
    return result


def validate_flowering_flag(value: Any) -> ValidationResult:
    result = ValidationResult(True)
    if not isinstance(value, bool):
        result.add_error("Flowering flag must be True or False")
    return result


class Plant(BaseModel):
    """
    Plant domain model representing one living plant specimen.

    Fields:
    - name (String): 2-50 characters, letters and spaces only
    - type (PlantType): plant category
    - age (Integer): age in years, 0-5000
    - height (Float): height in meters, greater than 0 and at most 115.7
    - planting_date (Date): not before 1900 and not in the future
    - is_flowering (Boolean): flowering flag, defaults to True

    Every field is validated on construction and again on every assignment,
    so a Plant can never hold an invalid value. Rule violations raise
    ValidationError (a ValueError); use update() for a non-raising variant.

    The last watering time can only be changed by water().
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    name: str
    type: PlantType
    age: int
    height: float
    planting_date: date
    is_flowering: bool = True

    _last_watered_at: Optional[datetime] = PrivateAttr(default=None)

    def __init__(
        self,
        name: str,
        type: PlantType,
        age: int,
        height: float,
        planting_date: date,
        **data: Any
    ) -> None:
        try:
            super().__init__(
                name=name,
                type=type,
                age=age,
                height=height,
                planting_date=planting_date,
                **data
            )
        except PydanticValidationError as exc:
            error = ValidationError.from_pydantic(exc)
            logger.warning(
                f"Plant creation rejected: {error.message}",
                extra={'field': error.field}
            )
            raise error from exc

        logger.debug(
            f"Plant created: {self.name}",
            extra={'plant_name': self.name, 'plant_type': self.type.value}
        )

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            error = ValidationError.from_pydantic(exc)
            logger.warning(
                f"Change of {name} rejected for plant {self.name}: {error.message}",
                extra={'field': name}
            )
            raise error from exc

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> "Plant":
        """Build a plant from a mapping, raising the domain ValidationError on bad data."""
        try:
            return super().model_validate(obj, **kwargs)
        except PydanticValidationError as exc:
            error = ValidationError.from_pydantic(exc)
            logger.warning(
                f"Plant creation rejected: {error.message}",
                extra={'field': error.field}
            )
            raise error from exc

    @classmethod
    def model_validate_json(cls, json_data: Any, **kwargs: Any) -> "Plant":
        try:
            return super().model_validate_json(json_data, **kwargs)
        except PydanticValidationError as exc:
            raise ValidationError.from_pydantic(exc) from exc

    @classmethod
    def model_construct(cls, _fields_set: Any = None, **values: Any) -> "Plant":
        """
        Unvalidated construction is not supported for plants.

        The values go through the same validation as Plant(...).
        """
        return cls.model_validate(values)

    # Field validators run before type coercion so every rule reports its own message

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        """Validate plant name: 2-50 letters or spaces"""
        result = validate_plant_name(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return v

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v):
        """Validate plant type against the closed PlantType set"""
        result = validate_plant_type(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return PlantType(v)

    @field_validator('age', mode='before')
    @classmethod
    def validate_age(cls, v):
        result = validate_plant_age(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return v

    @field_validator('height', mode='before')
    @classmethod
    def validate_height(cls, v):
        result = validate_plant_height(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return v

    @field_validator('planting_date', mode='before')
    @classmethod
    def validate_planting(cls, v):
        """Validate planting date: year 1900 or later, not in the future"""
        result = validate_planting_date(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        if isinstance(v, datetime):
            return v.date()
        return v

    @field_validator('is_flowering', mode='before')
    @classmethod
    def validate_is_flowering(cls, v):
        result = validate_flowering_flag(v)
        if not result.is_valid:
            raise ValueError(result.first_error)
        return v

    # Derived attributes

    @property
    def age_category(self) -> AgeCategory:
        """Young under 2 years, Adult under 10, Old otherwise"""
        return AgeCategory.from_age(self.age)

    def age_category_label(self, locale: Optional[str] = None) -> str:
        return self.age_category.label(locale)

    @property
    def last_watered_at(self) -> Optional[datetime]:
        """Time of the last watering, None if never watered"""
        return self._last_watered_at

    @property
    def last_watered(self) -> str:
        return self.get_last_watered()

    def get_last_watered(self, locale: Optional[str] = None) -> str:
        """
        Last watering time as dd.MM.yyyy HH:mm.

        Args:
            locale: Locale for the "never watered" text

        Returns:
            Formatted watering time, or the localized "Never"
        """
        if self._last_watered_at is None:
            return translate('plants.never_watered', locale)
        return format_watering_time(self._last_watered_at, locale)

    def is_mature(self) -> bool:
        """A plant is mature once it is older than five years"""
        return self.age > MATURITY_AGE

    # Behaviours

    def water(self, locale: Optional[str] = None) -> PlantWatered:
        """
        Water the plant now.

        Records the current local time as the last watering time.

        Args:
            locale: Locale of the notice carried by the event

        Returns:
            PlantWatered event with the watering time and notice
        """
        watered_at = datetime.now().astimezone()
        event = PlantWatered(self.name, watered_at, locale)
        self._last_watered_at = watered_at

        logger.log_business_event(
            PlantWatered.EVENT_TYPE,
            event.message,
            entity_type='plant',
            extra={'plant_name': self.name, 'watered_at': watered_at.isoformat()}
        )
        return event

    def grow(self, amount: float, locale: Optional[str] = None) -> PlantGrew:
        """
        Increase the plant height.

        Args:
            amount: Growth in meters, must be greater than 0
            locale: Locale of the notice carried by the event

        Returns:
            PlantGrew event with the amount and the new height

        Raises:
            ValidationError: If amount is not positive or the new height
                would exceed the maximum height; height is left unchanged
        """
        result = validate_growth_amount(amount)
        if not result.is_valid:
            logger.warning(
                f"Growth rejected for plant {self.name}: {result.first_error}",
                extra={'amount': amount}
            )
            raise ValidationError(
                result.first_error,
                field='amount',
                value=amount,
                constraint='positive_growth'
            )

        previous_height = self.height
        new_height = previous_height + amount
        if new_height <= previous_height:
            logger.warning(
                f"Growth rejected for plant {self.name}: amount too small to change the height",
                extra={'amount': amount, 'height': previous_height}
            )
            raise ValidationError(
                "Growth amount is too small to change the plant height",
                field='amount',
                value=amount,
                constraint='positive_growth'
            )

        event = PlantGrew(self.name, amount, previous_height, new_height, locale)
        self.height = new_height
        logger.log_business_event(
            PlantGrew.EVENT_TYPE,
            event.message,
            entity_type='plant',
            extra={'plant_name': self.name, 'amount': amount, 'new_height': self.height}
        )
        return event

    def update(self, **changes: Any) -> ValidationResult:
        """
        Change several attributes at once without raising.

        All changes are checked first and applied only if every one of
        them is valid, so the plant is never left half-updated.

        Args:
            **changes: Field name -> new value

        Returns:
            ValidationResult; errors are prefixed with the field name
        """
        result = ValidationResult(True)

        for field_name, value in changes.items():
            rule = _ATTRIBUTE_RULES.get(field_name)
            if rule is None:
                result.add_error(f"{field_name}: unknown or read-only attribute")
                continue

            field_result = rule(value)
            for error in field_result.errors:
                result.add_error(f"{field_name}: {error}")

        if not result.is_valid:
            logger.warning(
                f"Update rejected for plant {self.name}",
                extra={'errors': result.errors}
            )
            return result

        for field_name, value in changes.items():
            setattr(self, field_name, value)

        return result

    # Text

    def get_description(self, locale: Optional[str] = None) -> str:
        """Name, type, age and height, e.g. "Oak (Tree) - 3 years, 20.5 m" """
        return translate(
            'plants.description',
            locale,
            name=self.name,
            type=self.type.value,
            age=self.age,
            height=format_plant_number(self.height)
        )

    def get_planting_info(self, locale: Optional[str] = None) -> str:
        """Sentence telling when the plant was planted"""
        return translate(
            'plants.planting_info',
            locale,
            name=self.name,
            date=format_planting_date(self.planting_date, locale)
        )

    def to_summary(self, locale: Optional[str] = None) -> Dict[str, Any]:
        """
        Plain dictionary view of the plant, derived attributes included.

        Args:
            locale: Locale for the textual values

        Returns:
            Plant data as dictionary
        """
        data = self.model_dump()
        data.update({
            'type': self.type.value,
            'age_category': self.age_category.value,
            'is_mature': self.is_mature(),
            'last_watered': self.get_last_watered(locale),
            'description': self.get_description(locale),
        })
        return data

    def __str__(self) -> str:
        return self.get_description()


_ATTRIBUTE_RULES = {
    'name': validate_plant_name,
    'type': validate_plant_type,
    'age': validate_plant_age,
    'height': validate_plant_height,
    'planting_date': validate_planting_date,
    'is_flowering': validate_flowering_flag,
}

# 📄 File: plantkeeper/modules/plant_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the plant data model - what we know about a plant and the kinds of plants there are.
# 🧪 Purpose (Technical Summary):
# Package initialization for the Plant entity with its enums and validation rules.

from .plant import (
    MATURITY_AGE,
    AgeCategory,
    Plant,
    PlantType,
    validate_flowering_flag,
    validate_plant_type,
)

__all__ = [
    "Plant",
    "PlantType",
    "AgeCategory",
    "MATURITY_AGE",
    "validate_plant_type",
    "validate_flowering_flag",
]

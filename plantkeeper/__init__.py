# 📄 File: plantkeeper/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'plantkeeper' folder holds the Plant Keeper code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version info and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Package imports throughout the application

"""
Plant Keeper - validated plant entity with watering, growth and maturity tracking.
"""

__version__ = "1.0.0"
__title__ = "Plant Keeper"
__description__ = "Validated plant domain model"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]

# 📄 File: plantkeeper/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell Plant Keeper how to log and which language to speak.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - Logging, localization and formatting utilities

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Logging configuration
- Localization defaults
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]

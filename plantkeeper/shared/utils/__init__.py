# 📄 File: plantkeeper/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Collection of helpful tools used across the app for logging, checking data,
# formatting text and translating messages.

# 🧪 Purpose (Technical Summary):
# Utilities package. Submodules are imported directly (logging, validators,
# formatters, localization) to keep import order explicit.

"""
Shared Utilities Package

- logging: structured logging with JSON formatting
- validators: plant attribute validation rules
- formatters: date, time and measurement formatting
- localization: message catalogue and translation
"""

__all__ = ["logging", "validators", "formatters", "localization"]

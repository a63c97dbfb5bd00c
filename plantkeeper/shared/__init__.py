# 📄 File: plantkeeper/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a package of common tools every part of Plant Keeper can use.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions, events
# and cross-cutting utilities.

"""
Shared Kernel - Common Utilities

- Configuration management
- Exception hierarchy
- Domain event base classes and publishing
- Validators, formatters, localization
- Logging utilities
"""

__all__ = []

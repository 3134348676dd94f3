"""Utility modules for Naviksha: constants, helpers, exceptions and logging."""

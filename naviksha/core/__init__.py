"""Core configuration for Naviksha."""

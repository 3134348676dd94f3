"""Naviksha career match engine.

Scores RIASEC personality and academic assessments against a career catalog
and produces ranked, bucketed career recommendations.
"""

__version__ = "1.0.0"

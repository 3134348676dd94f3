"""Custom exception classes for the Naviksha career match engine.

The scoring core itself degrades gracefully on malformed content; these
exceptions cover configuration problems, catalog loading and unexpected
failures surfaced by the report pipeline.
"""

from typing import Any, Dict, List, Optional


class NavikshaError(Exception):
    """Base exception class for all Naviksha application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize Naviksha error.

        Args:
            message: Error message
            error_code: Application-specific error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary representation.

        Returns:
            Dict[str, Any]: Exception data
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"Code: {self.error_code}")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " | ".join(parts)


class ValidationError(NavikshaError):
    """Exception for input validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        validation_errors: Optional[List[str]] = None,
        **kwargs
    ):
        """Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            value: Invalid value
            validation_errors: List of specific validation errors
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        if validation_errors:
            details["validation_errors"] = validation_errors

        kwargs["details"] = details
        kwargs.setdefault("error_code", "VALIDATION_ERROR")
        super().__init__(message, **kwargs)

        self.field = field
        self.value = value
        self.validation_errors = validation_errors or []


class ConfigurationError(NavikshaError):
    """Exception for invalid engine configuration."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        """Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if setting:
            details["setting"] = setting

        kwargs["details"] = details
        kwargs.setdefault("error_code", "CONFIGURATION_ERROR")
        super().__init__(message, **kwargs)

        self.setting = setting


class CatalogLoadError(NavikshaError):
    """Exception for a career catalog that cannot be read."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        """Initialize catalog load error.

        Args:
            message: Error message
            source: Path of the catalog file
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if source:
            details["source"] = source

        kwargs["details"] = details
        kwargs.setdefault("error_code", "CATALOG_LOAD_ERROR")
        super().__init__(message, **kwargs)

        self.source = source


class ReportGenerationError(NavikshaError):
    """Exception raised when the report pipeline fails unexpectedly."""

    def __init__(self, message: str, stage: Optional[str] = None, **kwargs):
        """Initialize report generation error.

        Args:
            message: Error message
            stage: Pipeline stage that failed
            **kwargs: Additional arguments for parent class
        """
        details = kwargs.get("details", {})
        if stage:
            details["stage"] = stage

        kwargs["details"] = details
        kwargs.setdefault("error_code", "REPORT_GENERATION_ERROR")
        super().__init__(message, **kwargs)

        self.stage = stage

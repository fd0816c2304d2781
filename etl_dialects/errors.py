"""Structured exception hierarchy for dialect-based content.

Provides specific exception types for configuration and resolution
failures, with the source location of the offending XML element.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from etl_dialects.identity import DialectIdentifier
    from etl_dialects.xml_tree import Location

__all__ = [
    "DialectError",
    "ConfigurationError",
    "UnsupportedDialectError",
    "ResourceError",
]


class DialectError(Exception):
    """Base exception for all etl-dialects errors.

    Provides structured error information for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        location: Optional["Location"] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.details = details or {}
        self.suggestion = suggestion

        # Build full message
        parts = [f"[{location}] {message}" if location is not None else message]

        if self.details:
            detail_lines = [f"  {k}: {v}" for k, v in self.details.items()]
            parts.append("\nDetails:")
            parts.extend(detail_lines)

        if suggestion:
            parts.append(f"\nSuggestion: {suggestion}")

        super().__init__("\n".join(parts))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "location": str(self.location) if self.location is not None else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ConfigurationError(DialectError):
    """Error in the XML configuration.

    Raised for malformed XML, invalid ``name``/``version`` patterns,
    includes without ``href`` and misuse of the configure/query lifecycle.
    """

    def __init__(
        self,
        message: str,
        *,
        attribute: Optional[str] = None,
        value: Any = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.attribute = attribute
        self.value = value
        self.cause = cause

        details = kwargs.pop("details", {})
        if attribute:
            details["attribute"] = attribute
        if value is not None:
            details["value"] = str(value)
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        super().__init__(message, details=details, **kwargs)


class UnsupportedDialectError(DialectError):
    """No dialect block applies to the connected backend."""

    def __init__(
        self,
        message: str,
        *,
        identity: Optional["DialectIdentifier"] = None,
        **kwargs: Any,
    ) -> None:
        self.identity = identity

        details = kwargs.pop("details", {})
        details["dialect"] = str(identity) if identity is not None else "<unidentified>"

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = (
                "Add a <dialect> block whose name/version patterns match this "
                "backend, or untagged content usable by any backend."
            )

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)


class ResourceError(DialectError):
    """An included resource could not be read."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        cause: Optional[Exception] = None,
        **kwargs: Any,
    ) -> None:
        self.path = path
        self.cause = cause

        details = kwargs.pop("details", {})
        if path:
            details["path"] = path
        if cause:
            details["cause"] = str(cause)
            details["cause_type"] = type(cause).__name__

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = (
                "Check the include href, or give the <include> element "
                "fallback text to use when the file is missing."
            )

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)

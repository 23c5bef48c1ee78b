"""
Utility helpers used by the decoder.

This subpackage exposes the error types and the diagnostic formatting
helpers.
"""

from .errors import (
    ERRORS,
    ConfigError,
    MalformedDocument,
    MissingOrInvalidVersion,
    WXRError,
    XmlDiagnostic,
    format_diagnostic,
    format_failure_report,
)

__all__ = [
    "ERRORS",
    "ConfigError",
    "MalformedDocument",
    "MissingOrInvalidVersion",
    "WXRError",
    "XmlDiagnostic",
    "format_diagnostic",
    "format_failure_report",
]

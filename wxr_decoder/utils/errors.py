"""
Error types and diagnostic reporting for the WXR decoder.

The :mod:`wxr_decoder.utils.errors` module centralizes the failures a decode
call can end with.  Only two things abort a decode:

``MalformedDocument``
    The bytes are not well-formed XML, or the document declares a DOCTYPE.
    The exception carries every diagnostic the XML reader emitted.

``MissingOrInvalidVersion``
    The channel has no ``wp:wxr_version`` element, or its text is not of the
    form ``<digits>.<digits>``.

The ``ERRORS`` dictionary maps error codes to human readable messages.  Codes
not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Literal, Optional, Sequence

from pydantic import BaseModel, ConfigDict

ERRORS: Dict[str, str] = {
    "MALFORMED_DOCUMENT": "There was an error when reading this WXR file",
    "DOCTYPE_NOT_ALLOWED": "Document type declarations are not allowed in WXR files",
    "INVALID_VERSION": "This does not appear to be a WXR file, missing/invalid WXR version number",
    "INVALID_CONFIG": "Invalid decoder configuration",
}

Severity = Literal["warning", "error", "fatal"]

_SEVERITY_LABELS: Dict[str, str] = {
    "warning": "Warning",
    "error": "Error",
    "fatal": "Fatal Error",
}


class XmlDiagnostic(BaseModel):
    """One entry of the XML reader's error log."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    code: int
    message: str
    line: int = 0
    column: int = 0
    source_file: Optional[str] = None


def format_diagnostic(diagnostic: XmlDiagnostic) -> str:
    """Render ``diagnostic`` as a single line of text.

    Example: ``Fatal Error 76: Opening and ending tag mismatch (Line: 3, Column: 9)``
    followed by `` [File: export.xml]`` when the source file is known.
    """
    label = _SEVERITY_LABELS.get(diagnostic.severity, "Error")
    text = (
        f"{label} {diagnostic.code}: {diagnostic.message.strip()} "
        f"(Line: {diagnostic.line}, Column: {diagnostic.column})"
    )
    if diagnostic.source_file:
        text += f" [File: {diagnostic.source_file}]"
    return text


def format_failure_report(diagnostics: Iterable[XmlDiagnostic], *, code: str = "MALFORMED_DOCUMENT") -> str:
    """Join every diagnostic into the message of a failed load.

    Parameters
    ----------
    diagnostics:
        All entries captured while loading.  None are dropped.
    code:
        Error code whose message prefixes the report.  When there are no
        diagnostics the message for ``code`` is returned on its own.
    """
    rendered = [format_diagnostic(d) for d in diagnostics]
    if not rendered:
        return ERRORS.get(code, code)
    return f"{ERRORS['MALFORMED_DOCUMENT']}: {', '.join(rendered)}"


class WXRError(Exception):
    """Base class for decoder errors.  Retrying with the same input fails again."""

    def __init__(self, code: str, message: Optional[str] = None) -> None:
        self.code = code
        self.message = message or ERRORS.get(code, code)
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class MalformedDocument(WXRError):
    """The export could not be loaded as a well-formed, DOCTYPE-free XML document."""

    def __init__(self, diagnostics: Sequence[XmlDiagnostic] = (), *, doctype: bool = False) -> None:
        self.diagnostics = tuple(diagnostics)
        if not doctype:
            super().__init__("MALFORMED_DOCUMENT", format_failure_report(self.diagnostics))
            return
        message = ERRORS["DOCTYPE_NOT_ALLOWED"]
        if self.diagnostics:
            message += "; " + ", ".join(format_diagnostic(d) for d in self.diagnostics)
        super().__init__("DOCTYPE_NOT_ALLOWED", message)

    def to_dict(self) -> Dict[str, Any]:
        entry = super().to_dict()
        entry["diagnostics"] = [d.model_dump() for d in self.diagnostics]
        return entry


class ConfigError(WXRError):
    """The decoder configuration has the wrong shape."""

    def __init__(self, detail: str) -> None:
        super().__init__("INVALID_CONFIG", f"{ERRORS['INVALID_CONFIG']}: {detail}")


class MissingOrInvalidVersion(WXRError):
    """The channel lacks a usable ``wp:wxr_version``."""

    def __init__(self, found: Optional[str] = None) -> None:
        self.found = found
        super().__init__("INVALID_VERSION")

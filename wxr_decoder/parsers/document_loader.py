"""
Loading of WXR bytes into an lxml tree.

The parser built here never resolves entities, never touches the network
and never loads a DTD.  A document that declares a DOCTYPE is rejected even
when it is well-formed, so internal entity declarations cannot be abused for
expansion attacks.

Diagnostics are read from the parser's own error log, which lxml keeps per
parser instance.  A fresh parser is built for every call, so two decodes
running at the same time never see each other's messages.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from lxml import etree

from ..utils.errors import MalformedDocument, XmlDiagnostic

logger = logging.getLogger(__name__)

# lxml.etree.ErrorLevels: WARNING=1, ERROR=2, FATAL=3
_LEVELS = {1: "warning", 2: "error", 3: "fatal"}

# File name lxml reports for documents parsed from memory without a base URL.
_MEMORY_SOURCE = "<string>"


def make_parser(*, huge_tree: bool = False) -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
        recover=False,
        huge_tree=huge_tree,
    )


def to_diagnostic(entry) -> XmlDiagnostic:
    """Convert an lxml ``_LogEntry`` into an :class:`XmlDiagnostic`."""
    source = entry.filename
    if source == _MEMORY_SOURCE:
        source = None
    return XmlDiagnostic(
        severity=_LEVELS.get(entry.level, "error"),
        code=entry.type,
        message=(entry.message or "").strip(),
        line=entry.line or 0,
        column=entry.column or 0,
        source_file=source or None,
    )


@contextmanager
def collect_diagnostics(parser: etree.XMLParser) -> Iterator[List[XmlDiagnostic]]:
    """Yield a list that holds the parser's diagnostics once the block exits.

    The list is filled on every exit path, including when the block raises.
    """
    diagnostics: List[XmlDiagnostic] = []
    try:
        yield diagnostics
    finally:
        diagnostics.extend(to_diagnostic(entry) for entry in parser.error_log)


def declares_doctype(root: etree._Element) -> bool:
    return bool(root.getroottree().docinfo.doctype)


def load_document(
    data: bytes,
    *,
    huge_tree: bool = False,
    source_name: Optional[str] = None,
) -> etree._Element:
    """Parse ``data`` and return the root element.

    Args:
        data: The complete export as bytes.  The XML declaration decides
            the character encoding, so text must not be passed in.
        huge_tree: Lift lxml's limits on text and tree size.
        source_name: Name used as the ``source_file`` of diagnostics.

    Raises:
        TypeError: If ``data`` is not a bytes-like object.
        MalformedDocument: If the document is not well-formed or declares a
            DOCTYPE.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"WXR data must be bytes, not {type(data).__name__}")
    data = bytes(data)

    parser = make_parser(huge_tree=huge_tree)
    root: Optional[etree._Element] = None
    with collect_diagnostics(parser) as diagnostics:
        try:
            root = etree.fromstring(data, parser, base_url=source_name)
        except etree.XMLSyntaxError:
            root = None

    if root is None:
        logger.debug("XML reader reported %d diagnostic(s)", len(diagnostics))
        raise MalformedDocument(diagnostics)
    if declares_doctype(root):
        logger.debug("Rejecting document with DOCTYPE %r", root.getroottree().docinfo.doctype)
        raise MalformedDocument(diagnostics, doctype=True)
    return root

"""
High-level orchestration of a WXR decode.

This module defines a :class:`WXRDecoder` class that ties the loader, the
namespace resolver and the extractors together into one pipeline:

1. load the bytes into an lxml tree (rejecting malformed input and DOCTYPEs)
2. resolve the ``wp`` / ``excerpt`` namespace bindings
3. read and check the WXR version, then the site URLs
4. decode taxonomy, authors and posts

Configuration is supplied directly as a dictionary or via a JSON file path;
see :mod:`wxr_decoder.config`.  A decoder holds no state between calls, so
one instance can be shared and the same bytes always decode to equal
results.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Union

from .config import load_config
from .extractors import (
    extract_authors,
    extract_categories,
    extract_posts,
    extract_site_urls,
    extract_tags,
    extract_terms,
    extract_version,
)
from .models import ExportDocument
from .parsers import load_document, resolve_namespaces
from .utils.errors import WXRError

logger = logging.getLogger(__name__)


class WXRDecoder:
    """
    Decodes WordPress eXtended RSS exports into :class:`ExportDocument`
    records.  Failures are raised as :class:`~wxr_decoder.utils.errors.WXRError`
    subclasses and also logged at WARNING level.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        self.config = load_config(config, config_file=config_file)

    def log_message(self, message: str, level: str = "INFO") -> None:
        level_no = logging.getLevelName(level.upper())
        if not isinstance(level_no, int):
            level_no = logging.INFO
        logger.log(level_no, message)

    def decode(self, data: bytes, *, source_name: Optional[str] = None) -> ExportDocument:
        """Decode one complete export held in memory.

        :param data: The raw bytes of the export.
        :param source_name: Optional file name reported in diagnostics.
        :return: The decoded document.
        :raises MalformedDocument: if the XML is not well-formed or has a DOCTYPE.
        :raises MissingOrInvalidVersion: if ``wp:wxr_version`` is missing or invalid.
        """
        try:
            root = load_document(
                data,
                huge_tree=bool(self.config["parser"]["huge_tree"]),
                source_name=source_name,
            )
            namespaces = resolve_namespaces(root, self.config["namespaces"])
            version = extract_version(root, namespaces)
        except WXRError as e:
            self.log_message(f"Could not decode {source_name or 'WXR document'}: {e.message}", level="WARNING")
            raise

        base_url, base_blog_url = extract_site_urls(root, namespaces)
        document = ExportDocument(
            version=version,
            base_url=base_url,
            base_blog_url=base_blog_url,
            authors=extract_authors(root, namespaces),
            categories=extract_categories(root, namespaces),
            tags=extract_tags(root, namespaces),
            terms=extract_terms(root, namespaces),
            posts=extract_posts(root, namespaces),
        )
        self.log_message(
            f"Decoded WXR {version}: {len(document.authors)} authors, "
            f"{len(document.categories)} categories, {len(document.tags)} tags, "
            f"{len(document.terms)} terms, {len(document.posts)} posts",
            level="DEBUG",
        )
        return document


def decode_wxr(
    data: bytes,
    *,
    config: Optional[Dict[str, Any]] = None,
    source_name: Optional[str] = None,
) -> ExportDocument:
    """Decode ``data`` with a one-off :class:`WXRDecoder`."""
    return WXRDecoder(config).decode(data, source_name=source_name)


def decode_wxr_file(path: Union[str, os.PathLike], *, config: Optional[Dict[str, Any]] = None) -> ExportDocument:
    """Read the export at ``path`` and decode it.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MalformedDocument: If the file is not a well-formed XML document.
        MissingOrInvalidVersion: If the file is not a WXR export.
    """
    with open(path, "rb") as f:
        data = f.read()
    return decode_wxr(data, config=config, source_name=os.fspath(path))

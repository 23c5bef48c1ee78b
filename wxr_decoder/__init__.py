"""
Top-level package for the WordPress eXtended RSS (WXR) decoder.

This package turns a WordPress export file into immutable records: authors,
categories, tags, custom-taxonomy terms, and posts with their comments and
metadata.  Modules are split into subpackages:

* :mod:`wxr_decoder.parsers` – safe XML loading and namespace resolution
* :mod:`wxr_decoder.extractors` – decoding of each part of the export
* :mod:`wxr_decoder.models` – the records returned to callers
* :mod:`wxr_decoder.utils` – error types and diagnostic formatting

Orchestration is handled in :mod:`wxr_decoder.decoder`.  Reading files and
writing the decoded data anywhere are left to the caller.
"""

from .decoder import WXRDecoder, decode_wxr, decode_wxr_file
from .models import Author, Comment, ExportDocument, MetaPair, Post, PostTerm, Term
from .utils.errors import ConfigError, MalformedDocument, MissingOrInvalidVersion, WXRError, XmlDiagnostic

__all__ = [
    "Author",
    "Comment",
    "ConfigError",
    "ExportDocument",
    "MalformedDocument",
    "MetaPair",
    "MissingOrInvalidVersion",
    "Post",
    "PostTerm",
    "Term",
    "WXRDecoder",
    "WXRError",
    "XmlDiagnostic",
    "decode_wxr",
    "decode_wxr_file",
]

"""
XML loading and namespace handling.

This subpackage exposes ``load_document`` from
:mod:`wxr_decoder.parsers.document_loader` and ``resolve_namespaces`` from
:mod:`wxr_decoder.parsers.namespaces`.
"""

from .document_loader import load_document
from .namespaces import resolve_namespaces

__all__ = ["load_document", "resolve_namespaces"]

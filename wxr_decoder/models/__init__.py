"""
Immutable records produced by the WXR decoder.

See :mod:`wxr_decoder.models.wxr_document` for the field definitions.
"""

from .wxr_document import (
    Author,
    Comment,
    ExportDocument,
    MetaPair,
    Post,
    PostTerm,
    Term,
)

__all__ = [
    "Author",
    "Comment",
    "ExportDocument",
    "MetaPair",
    "Post",
    "PostTerm",
    "Term",
]

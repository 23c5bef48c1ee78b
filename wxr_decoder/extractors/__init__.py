"""
Extractors for the parts of a WordPress export.

Each module reads one part of a loaded WXR tree (site metadata, taxonomy,
authors, posts) using the namespace bindings returned by
:func:`wxr_decoder.parsers.resolve_namespaces`.  None of them depend on
each other's output.
"""

from .authors import extract_authors
from .posts import extract_posts
from .site import extract_site_urls, extract_version
from .taxonomy import extract_categories, extract_tags, extract_terms

__all__ = [
    "extract_authors",
    "extract_categories",
    "extract_posts",
    "extract_site_urls",
    "extract_tags",
    "extract_terms",
    "extract_version",
]

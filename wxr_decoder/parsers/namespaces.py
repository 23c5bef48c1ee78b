from __future__ import annotations

from typing import Dict, Mapping, Optional

from lxml import etree

from ..config import DEFAULT_EXCERPT_NAMESPACE, DEFAULT_WP_NAMESPACE

DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"

DEFAULT_NAMESPACES: Dict[str, str] = {
    "wp": DEFAULT_WP_NAMESPACE,
    "excerpt": DEFAULT_EXCERPT_NAMESPACE,
}


def resolve_namespaces(root: etree._Element, defaults: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Return the prefix -> URI bindings used for every namespaced lookup.

    Bindings declared on the document root are kept as they are, whatever
    export version they point to.  ``wp`` and ``excerpt`` are added from
    ``defaults`` only when the root does not declare them.
    """
    namespaces = {prefix: uri for prefix, uri in root.nsmap.items() if prefix}
    for prefix, uri in (defaults or DEFAULT_NAMESPACES).items():
        namespaces.setdefault(prefix, uri)
    return namespaces

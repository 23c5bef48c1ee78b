from __future__ import annotations

from typing import Dict, Mapping

from lxml import etree

from ..models import Author
from .fields import child_int, child_text


def extract_authors(root: etree._Element, namespaces: Mapping[str, str]) -> Dict[str, Author]:
    """Map each ``wp:author`` of the channel by its login.

    An author whose login was already seen replaces the earlier entry as a
    whole; fields are not merged.
    """
    wp = namespaces["wp"]
    authors: Dict[str, Author] = {}
    for element in root.xpath("/rss/channel/wp:author", namespaces=dict(namespaces)):
        login = child_text(element, wp, "author_login")
        authors[login] = Author(
            id=child_int(element, wp, "author_id"),
            login=login,
            email=child_text(element, wp, "author_email"),
            display_name=child_text(element, wp, "author_display_name"),
            first_name=child_text(element, wp, "author_first_name"),
            last_name=child_text(element, wp, "author_last_name"),
        )
    return authors

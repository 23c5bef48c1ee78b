"""
Decoding of channel ``<item>`` elements into posts.

Every item becomes a :class:`~wxr_decoder.models.Post`, whatever its
``wp:post_type`` (posts, pages, attachments, menu items and so on).  Nested
collections (assigned terms, post meta and comments) keep the order of the
export.
"""

from __future__ import annotations

from typing import Mapping

from lxml import etree

from ..models import Comment, Post, PostTerm
from ..parsers.namespaces import CONTENT_NAMESPACE, DC_NAMESPACE
from .fields import (
    child_int,
    child_text,
    element_text,
    find_child,
    find_children,
    meta_pairs,
    optional_child_text,
)


def _assigned_terms(item: etree._Element) -> tuple[PostTerm, ...]:
    """Build the item's term assignments from its ``<category>`` children.

    Elements without a ``nicename`` attribute are skipped.  Older exports
    emit such bare categories next to the full ones.
    """
    terms = []
    for category in find_children(item, None, "category"):
        slug = category.get("nicename")
        if slug is None:
            continue
        terms.append(
            PostTerm(
                name=element_text(category),
                slug=slug,
                taxonomy_domain=category.get("domain", ""),
            )
        )
    return tuple(terms)


def _comment(element: etree._Element, wp: str) -> Comment:
    return Comment(
        id=child_int(element, wp, "comment_id"),
        author_name=child_text(element, wp, "comment_author"),
        author_email=child_text(element, wp, "comment_author_email"),
        author_ip=child_text(element, wp, "comment_author_IP"),
        author_url=child_text(element, wp, "comment_author_url"),
        date=child_text(element, wp, "comment_date"),
        date_gmt=child_text(element, wp, "comment_date_gmt"),
        content=child_text(element, wp, "comment_content"),
        approved=child_text(element, wp, "comment_approved"),
        type=child_text(element, wp, "comment_type"),
        parent_id=child_text(element, wp, "comment_parent"),
        user_id=child_int(element, wp, "comment_user_id"),
        meta=meta_pairs(element, wp, "commentmeta"),
    )


def _post(item: etree._Element, namespaces: Mapping[str, str]) -> Post:
    wp = namespaces["wp"]
    return Post(
        title=child_text(item, None, "title"),
        guid=child_text(item, None, "guid"),
        author_login=child_text(item, DC_NAMESPACE, "creator"),
        content=child_text(item, CONTENT_NAMESPACE, "encoded"),
        excerpt=child_text(item, namespaces["excerpt"], "encoded"),
        id=child_int(item, wp, "post_id"),
        date=child_text(item, wp, "post_date"),
        date_gmt=child_text(item, wp, "post_date_gmt"),
        comment_status=child_text(item, wp, "comment_status"),
        ping_status=child_text(item, wp, "ping_status"),
        name=child_text(item, wp, "post_name"),
        status=child_text(item, wp, "status"),
        parent_id=child_int(item, wp, "post_parent"),
        menu_order=child_int(item, wp, "menu_order"),
        post_type=child_text(item, wp, "post_type"),
        password=child_text(item, wp, "post_password"),
        is_sticky=child_int(item, wp, "is_sticky"),
        attachment_url=optional_child_text(item, wp, "attachment_url"),
        assigned_terms=_assigned_terms(item),
        meta=meta_pairs(item, wp, "postmeta"),
        comments=tuple(_comment(c, wp) for c in find_children(item, wp, "comment")),
    )


def extract_posts(root: etree._Element, namespaces: Mapping[str, str]) -> tuple[Post, ...]:
    """Decode the ``<item>`` children of the first ``<channel>``."""
    channel = find_child(root, None, "channel")
    if channel is None:
        return ()
    return tuple(_post(item, namespaces) for item in find_children(channel, None, "item"))

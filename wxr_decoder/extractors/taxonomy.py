"""
Channel-level taxonomy: ``wp:category``, ``wp:tag`` and ``wp:term``.

Each kind names its fields differently in the export, but all three decode
into :class:`~wxr_decoder.models.Term`.  Parents are kept as the raw text of
the export.
"""

from __future__ import annotations

from typing import Mapping

from lxml import etree

from ..models import Term
from .fields import child_int, child_text, meta_pairs


def _channel_elements(root: etree._Element, namespaces: Mapping[str, str], local_name: str) -> list:
    return root.xpath(f"/rss/channel/wp:{local_name}", namespaces=dict(namespaces))


def _category(element: etree._Element, wp: str) -> Term:
    return Term(
        kind="category",
        id=child_int(element, wp, "term_id"),
        slug=child_text(element, wp, "category_nicename"),
        parent=child_text(element, wp, "category_parent"),
        name=child_text(element, wp, "cat_name"),
        description=child_text(element, wp, "category_description"),
        meta=meta_pairs(element, wp, "termmeta"),
    )


def _tag(element: etree._Element, wp: str) -> Term:
    return Term(
        kind="tag",
        id=child_int(element, wp, "term_id"),
        slug=child_text(element, wp, "tag_slug"),
        name=child_text(element, wp, "tag_name"),
        description=child_text(element, wp, "tag_description"),
        meta=meta_pairs(element, wp, "termmeta"),
    )


def _term(element: etree._Element, wp: str) -> Term:
    return Term(
        kind="term",
        id=child_int(element, wp, "term_id"),
        taxonomy=child_text(element, wp, "term_taxonomy"),
        slug=child_text(element, wp, "term_slug"),
        parent=child_text(element, wp, "term_parent"),
        name=child_text(element, wp, "term_name"),
        description=child_text(element, wp, "term_description"),
        meta=meta_pairs(element, wp, "termmeta"),
    )


def extract_categories(root: etree._Element, namespaces: Mapping[str, str]) -> tuple[Term, ...]:
    wp = namespaces["wp"]
    return tuple(_category(e, wp) for e in _channel_elements(root, namespaces, "category"))


def extract_tags(root: etree._Element, namespaces: Mapping[str, str]) -> tuple[Term, ...]:
    wp = namespaces["wp"]
    return tuple(_tag(e, wp) for e in _channel_elements(root, namespaces, "tag"))


def extract_terms(root: etree._Element, namespaces: Mapping[str, str]) -> tuple[Term, ...]:
    wp = namespaces["wp"]
    return tuple(_term(e, wp) for e in _channel_elements(root, namespaces, "term"))

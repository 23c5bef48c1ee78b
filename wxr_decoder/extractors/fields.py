"""
Child lookups and permissive conversions shared by the extractors.

WXR exports differ between WordPress versions and plugins, so an absent
element is never an error here: text lookups fall back to a default and
integer lookups fall back to zero.  All of that fallback behaviour lives in
this module.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import List, Optional

from lxml import etree

from ..models import MetaPair

_LEADING_NUMBER = re.compile(r"[ \t\n\r\v\f]*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

INT_MAX = 2**63 - 1
INT_MIN = -(2**63)


def element_text(element: Optional[etree._Element]) -> str:
    """Concatenate the direct text nodes of ``element`` (CDATA included).

    Text inside nested child elements is ignored.
    """
    if element is None:
        return ""
    return "".join(element.xpath("text()"))


def to_int(text: Optional[str]) -> int:
    """Cast ``text`` to an integer the way PHP's ``(int)`` cast does.

    The leading numeric part is used, decimals and exponents included, and
    the result is truncated toward zero and clamped to the signed 64-bit
    range.  Text without a leading number gives ``0``.

    ``"12"`` -> 12, ``" 7px"`` -> 7, ``"1e3"`` -> 1000, ``"2.9"`` -> 2,
    ``"abc"`` -> 0, ``""`` -> 0.
    """
    if not text:
        return 0
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0
    number = Decimal(match.group(1))
    if number >= INT_MAX:
        return INT_MAX
    if number <= INT_MIN:
        return INT_MIN
    return int(number)


def _tag(namespace: Optional[str], local_name: str) -> str:
    return f"{{{namespace}}}{local_name}" if namespace else local_name


def find_child(element: etree._Element, namespace: Optional[str], local_name: str) -> Optional[etree._Element]:
    return element.find(_tag(namespace, local_name))


def find_children(element: etree._Element, namespace: Optional[str], local_name: str) -> List[etree._Element]:
    return element.findall(_tag(namespace, local_name))


def child_text(element: etree._Element, namespace: Optional[str], local_name: str, default: str = "") -> str:
    """Text of the first ``namespace:local_name`` child, or ``default``."""
    child = find_child(element, namespace, local_name)
    if child is None:
        return default
    return element_text(child)


def optional_child_text(element: etree._Element, namespace: Optional[str], local_name: str) -> Optional[str]:
    """Like :func:`child_text` but ``None`` when the child does not exist."""
    child = find_child(element, namespace, local_name)
    return None if child is None else element_text(child)


def child_int(element: etree._Element, namespace: Optional[str], local_name: str, default: int = 0) -> int:
    child = find_child(element, namespace, local_name)
    if child is None:
        return default
    return to_int(element_text(child))


def meta_pairs(element: etree._Element, namespace: str, local_name: str) -> tuple[MetaPair, ...]:
    """Collect ``meta_key``/``meta_value`` pairs from each ``local_name`` child.

    Used for ``termmeta``, ``postmeta`` and ``commentmeta``.  Order and
    duplicates are kept as found.
    """
    return tuple(
        MetaPair(
            key=child_text(meta, namespace, "meta_key"),
            value=child_text(meta, namespace, "meta_value"),
        )
        for meta in find_children(element, namespace, local_name)
    )

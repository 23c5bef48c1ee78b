from __future__ import annotations

import re
from typing import Mapping, Tuple

from lxml import etree

from ..utils.errors import MissingOrInvalidVersion
from .fields import element_text

_VERSION_PATTERN = re.compile(r"\d+\.\d+", re.ASCII)


def _channel_values(root: etree._Element, namespaces: Mapping[str, str], local_name: str) -> list:
    return root.xpath(f"/rss/channel/wp:{local_name}", namespaces=dict(namespaces))


def extract_version(root: etree._Element, namespaces: Mapping[str, str]) -> str:
    """Return the trimmed ``wp:wxr_version`` of the channel.

    Raises:
        MissingOrInvalidVersion: If the element is missing or its text is not
            ``<digits>.<digits>``.
    """
    found = _channel_values(root, namespaces, "wxr_version")
    if not found:
        raise MissingOrInvalidVersion()
    version = element_text(found[0]).strip()
    if not _VERSION_PATTERN.fullmatch(version):
        raise MissingOrInvalidVersion(version)
    return version


def extract_site_urls(root: etree._Element, namespaces: Mapping[str, str]) -> Tuple[str, str]:
    """Return ``(base_url, base_blog_url)``.

    A missing ``wp:base_blog_url`` falls back to the site URL, not to an
    empty string.
    """
    found = _channel_values(root, namespaces, "base_site_url")
    base_url = element_text(found[0]).strip() if found else ""

    found = _channel_values(root, namespaces, "base_blog_url")
    base_blog_url = element_text(found[0]).strip() if found else base_url
    return base_url, base_blog_url

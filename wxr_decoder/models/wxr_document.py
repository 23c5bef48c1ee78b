from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class _Record(BaseModel):
    """Base for every decoded record: immutable, populated by field name or WXR key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MetaPair(_Record):
    key: str = ""
    value: str = ""


class Author(_Record):
    id: int = Field(0, alias="author_id")
    login: str = Field("", alias="author_login")
    email: str = Field("", alias="author_email")
    display_name: str = Field("", alias="author_display_name")
    first_name: str = Field("", alias="author_first_name")
    last_name: str = Field("", alias="author_last_name")


class Term(_Record):
    """A category, tag or custom-taxonomy term declared at channel level.

    ``parent`` is kept as the raw text of the export.  Depending on the kind
    and the WXR version it may hold a slug or a numeric id, so resolving it
    is left to the caller.
    """

    kind: Literal["category", "tag", "term"] = "term"
    id: int = Field(0, alias="term_id")
    slug: str = ""
    parent: str = ""
    name: str = ""
    description: str = ""
    taxonomy: str = ""
    meta: tuple[MetaPair, ...] = Field((), alias="termmeta")


class PostTerm(_Record):
    name: str = ""
    slug: str = ""
    taxonomy_domain: str = Field("", alias="domain")


class Comment(_Record):
    id: int = Field(0, alias="comment_id")
    author_name: str = Field("", alias="comment_author")
    author_email: str = Field("", alias="comment_author_email")
    author_ip: str = Field("", alias="comment_author_IP")
    author_url: str = Field("", alias="comment_author_url")
    date: str = Field("", alias="comment_date")
    date_gmt: str = Field("", alias="comment_date_gmt")
    content: str = Field("", alias="comment_content")
    approved: str = Field("", alias="comment_approved")
    type: str = Field("", alias="comment_type")
    # Text on purpose: exports do not guarantee a numeric value here.
    parent_id: str = Field("", alias="comment_parent")
    user_id: int = Field(0, alias="comment_user_id")
    meta: tuple[MetaPair, ...] = Field((), alias="commentmeta")


class Post(_Record):
    id: int = Field(0, alias="post_id")
    title: str = Field("", alias="post_title")
    guid: str = ""
    author_login: str = Field("", alias="post_author")
    content: str = Field("", alias="post_content")
    excerpt: str = Field("", alias="post_excerpt")
    date: str = Field("", alias="post_date")
    date_gmt: str = Field("", alias="post_date_gmt")
    comment_status: str = ""
    ping_status: str = ""
    name: str = Field("", alias="post_name")
    status: str = ""
    post_type: str = ""
    password: str = Field("", alias="post_password")
    parent_id: int = Field(0, alias="post_parent")
    menu_order: int = 0
    is_sticky: int = 0
    attachment_url: Optional[str] = None
    assigned_terms: tuple[PostTerm, ...] = Field((), alias="terms")
    meta: tuple[MetaPair, ...] = Field((), alias="postmeta")
    comments: tuple[Comment, ...] = ()

    @property
    def is_attachment(self) -> bool:
        return self.attachment_url is not None


class ExportDocument(_Record):
    """Everything decoded from one WXR export.

    Collections keep the order in which the export lists them.  ``authors``
    is keyed by login; when an export repeats a login the later author
    replaces the earlier one.
    """

    version: str
    base_url: str = ""
    base_blog_url: str = ""
    authors: Mapping[str, Author] = Field(default_factory=dict, validate_default=True)
    categories: tuple[Term, ...] = ()
    tags: tuple[Term, ...] = ()
    terms: tuple[Term, ...] = ()
    posts: tuple[Post, ...] = ()

    @field_validator("authors", mode="after")
    @classmethod
    def _read_only_authors(cls, v: Mapping[str, Author]) -> Mapping[str, Author]:
        return MappingProxyType(dict(v))

    @field_serializer("authors", mode="wrap")
    def _dump_authors(self, v: Mapping[str, Author], handler):
        return handler(dict(v))

    def find_author(self, login: str) -> Optional[Author]:
        return self.authors.get(login)

    def post_types(self) -> Dict[str, int]:
        """Count posts per ``post_type`` in first-seen order."""
        return dict(Counter(post.post_type for post in self.posts))

    def to_wxr_dict(self) -> dict[str, Any]:
        """Dump using the keys of the classic WordPress importer array.

        ``attachment_url`` is left out of posts that have none, mirroring the
        importer, which only sets the key for attachments.
        """
        return self.model_dump(by_alias=True, exclude_none=True)

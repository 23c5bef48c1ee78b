import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import logging

import pytest

from wxr_decoder import (
    ExportDocument,
    MalformedDocument,
    MissingOrInvalidVersion,
    WXRDecoder,
    decode_wxr,
    decode_wxr_file,
)
from wxr_samples import FULL_EXPORT, wxr


def test_full_export_is_decoded():
    document = decode_wxr(FULL_EXPORT)
    assert isinstance(document, ExportDocument)
    assert document.version == "1.2"
    assert document.base_url == "http://example.com"
    assert document.base_blog_url == "http://example.com/blog"
    assert list(document.authors) == ["admin"]
    assert [c.slug for c in document.categories] == ["news"]
    assert [t.slug for t in document.tags] == ["python"]
    assert [t.slug for t in document.terms] == ["main-menu"]
    assert [p.id for p in document.posts] == [1, 9]
    assert document.post_types() == {"post": 1, "attachment": 1}
    assert document.find_author("admin").display_name == "Site Admin"
    assert document.find_author("ghost") is None


def test_single_author_version_one_one():
    document = decode_wxr(
        wxr("<wp:author><wp:author_login>admin</wp:author_login></wp:author>", version="1.1")
    )
    assert document.version == "1.1"
    assert set(document.authors) == {"admin"}


def test_decoding_twice_gives_equal_documents():
    assert decode_wxr(FULL_EXPORT) == decode_wxr(FULL_EXPORT)


def test_blog_url_fallback():
    document = decode_wxr(wxr("<wp:base_site_url>http://example.com</wp:base_site_url>"))
    assert document.base_blog_url == "http://example.com"


@pytest.mark.parametrize("version", ["abc", None])
def test_bad_version_aborts_before_collections(version):
    data = wxr(
        "<wp:author><wp:author_login>admin</wp:author_login></wp:author><item><title>x</title></item>",
        version=version,
    )
    with pytest.raises(MissingOrInvalidVersion):
        decode_wxr(data)


def test_doctype_fails_as_malformed():
    data = FULL_EXPORT.replace(b"<rss ", b"<!DOCTYPE rss>\n<rss ", 1)
    with pytest.raises(MalformedDocument):
        decode_wxr(data)


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="wxr_decoder"):
        with pytest.raises(MalformedDocument):
            WXRDecoder().decode(b"<rss>", source_name="broken.xml")
    assert "Could not decode broken.xml" in caplog.text


def test_document_is_immutable():
    document = decode_wxr(FULL_EXPORT)
    with pytest.raises(Exception):
        document.version = "9.9"
    with pytest.raises(Exception):
        document.posts[0].title = "changed"
    logins = list(document.authors)
    with pytest.raises(TypeError):
        document.authors["x"] = document.authors[logins[0]]
    assert list(document.authors) == logins
    assert isinstance(document.to_wxr_dict()["authors"], dict)


def test_configured_default_namespace_is_used_when_undeclared():
    data = (
        b'<rss xmlns:x="urn:custom-wp"><channel><x:wxr_version>1.0</x:wxr_version>'
        b"<item><x:post_id>4</x:post_id></item></channel></rss>"
    )
    with pytest.raises(MissingOrInvalidVersion):
        decode_wxr(data)
    document = decode_wxr(data, config={"namespaces": {"wp": "urn:custom-wp"}})
    assert document.posts[0].id == 4


def test_undeclared_wp_prefix_is_a_malformed_document():
    data = b"<rss><channel><wp:wxr_version>1.1</wp:wxr_version></channel></rss>"
    with pytest.raises(MalformedDocument) as excinfo:
        decode_wxr(data)
    assert excinfo.value.code == "MALFORMED_DOCUMENT"
    assert any(d.code == 201 for d in excinfo.value.diagnostics)


def test_exponent_post_id_is_cast_like_php():
    data = wxr("<item><wp:post_id>1e3</wp:post_id></item>")
    assert decode_wxr(data).posts[0].id == 1000


def test_to_wxr_dict_uses_importer_keys():
    data = decode_wxr(FULL_EXPORT).to_wxr_dict()
    assert data["authors"]["admin"]["author_login"] == "admin"
    post, attachment = data["posts"]
    assert post["post_title"] == "Hello world!"
    assert post["terms"][0] == {"name": "News", "slug": "news", "domain": "category"}
    assert post["postmeta"] == ({"key": "_edit_last", "value": "1"},)
    assert post["comments"][0]["comment_author_IP"] == "127.0.0.1"
    assert "attachment_url" not in post
    assert attachment["attachment_url"] == "http://example.com/wp-content/uploads/logo.png"
    assert data["categories"][0]["termmeta"] == ({"key": "color", "value": "blue"},)


def test_decode_wxr_file(tmp_path):
    path = tmp_path / "export.xml"
    path.write_bytes(FULL_EXPORT)
    assert decode_wxr_file(path) == decode_wxr(FULL_EXPORT)


def test_decode_wxr_file_reports_file_in_diagnostics(tmp_path):
    path = tmp_path / "broken.xml"
    path.write_bytes(b"<rss><channel></rss>")
    with pytest.raises(MalformedDocument) as excinfo:
        decode_wxr_file(path)
    assert excinfo.value.diagnostics[0].source_file == str(path)

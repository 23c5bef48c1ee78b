import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wxr_decoder.parsers.document_loader import load_document
from wxr_decoder.parsers.namespaces import resolve_namespaces


def test_defaults_are_added_when_the_document_omits_them():
    root = load_document(b'<rss xmlns:dc="http://purl.org/dc/elements/1.1/"><channel/></rss>')
    assert resolve_namespaces(root) == {
        "dc": "http://purl.org/dc/elements/1.1/",
        "wp": "http://wordpress.org/export/1.1/",
        "excerpt": "http://wordpress.org/export/1.1/excerpt/",
    }


def test_declared_bindings_are_never_overridden():
    root = load_document(
        b'<rss xmlns:wp="http://wordpress.org/export/1.0/" '
        b'xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/"><channel/></rss>'
    )
    namespaces = resolve_namespaces(root)
    assert namespaces["wp"] == "http://wordpress.org/export/1.0/"
    assert namespaces["excerpt"] == "http://wordpress.org/export/1.2/excerpt/"


def test_default_namespace_is_not_a_prefix_binding():
    root = load_document(b'<rss xmlns="http://example.com/ns"><channel/></rss>')
    assert None not in resolve_namespaces(root)


def test_custom_defaults():
    root = load_document(b"<rss><channel/></rss>")
    namespaces = resolve_namespaces(root, {"wp": "urn:wp", "excerpt": "urn:excerpt"})
    assert namespaces == {"wp": "urn:wp", "excerpt": "urn:excerpt"}

import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wxr_decoder.extractors.posts import extract_posts
from wxr_decoder.models import Comment, MetaPair, PostTerm
from wxr_decoder.parsers.document_loader import load_document
from wxr_decoder.parsers.namespaces import resolve_namespaces
from wxr_samples import FULL_EXPORT, wxr


def _posts(data):
    root = load_document(data)
    return extract_posts(root, resolve_namespaces(root))


def test_post_scalar_fields():
    post = _posts(FULL_EXPORT)[0]
    assert post.id == 1
    assert post.title == "Hello world!"
    assert post.guid == "http://example.com/?p=1"
    assert post.author_login == "admin"
    assert post.content == "<p>Welcome to WordPress.</p>"
    assert post.excerpt == "Welcome"
    assert post.date == "2020-01-01 10:00:00"
    assert post.date_gmt == "2020-01-01 09:00:00"
    assert (post.comment_status, post.ping_status) == ("open", "open")
    assert post.name == "hello-world"
    assert post.status == "publish"
    assert post.post_type == "post"
    assert post.password == ""
    assert (post.parent_id, post.menu_order, post.is_sticky) == (0, 0, 1)
    assert post.attachment_url is None
    assert not post.is_attachment


def test_assigned_terms_meta_and_comments():
    post = _posts(FULL_EXPORT)[0]
    assert post.assigned_terms == (
        PostTerm(name="News", slug="news", taxonomy_domain="category"),
        PostTerm(name="Python", slug="python", taxonomy_domain="post_tag"),
    )
    assert post.meta == (MetaPair(key="_edit_last", value="1"),)
    assert post.comments == (
        Comment(
            id=5,
            author_name="A WordPress Commenter",
            author_email="wapuu@wordpress.example",
            author_ip="127.0.0.1",
            author_url="https://wordpress.org/",
            date="2020-01-02 10:00:00",
            date_gmt="2020-01-02 09:00:00",
            content="Hi, this is a comment.",
            approved="1",
            type="comment",
            parent_id="0",
            user_id=0,
            meta=(MetaPair(key="akismet_result", value="false"),),
        ),
    )


def test_category_without_nicename_is_skipped():
    (post,) = _posts(
        wxr(
            "<item>"
            "<category><![CDATA[Legacy]]></category>"
            '<category domain="category" nicename="foo"><![CDATA[Foo]]></category>'
            "</item>"
        )
    )
    assert post.assigned_terms == (PostTerm(name="Foo", slug="foo", taxonomy_domain="category"),)


def test_category_without_domain_gets_empty_domain():
    (post,) = _posts(wxr('<item><category nicename="bar">Bar</category></item>'))
    assert post.assigned_terms == (PostTerm(name="Bar", slug="bar", taxonomy_domain=""),)


def test_attachment_url_absent_and_empty_are_distinguishable():
    absent, empty, present = _posts(
        wxr(
            "<item><wp:post_id>1</wp:post_id></item>"
            "<item><wp:post_id>2</wp:post_id><wp:attachment_url></wp:attachment_url></item>"
            "<item><wp:post_id>3</wp:post_id><wp:attachment_url>http://x/y.png</wp:attachment_url></item>"
        )
    )
    assert absent.attachment_url is None
    assert empty.attachment_url == ""
    assert empty.is_attachment
    assert present.attachment_url == "http://x/y.png"


def test_comment_without_meta_has_empty_meta_and_text_parent():
    (post,) = _posts(
        wxr(
            "<item><wp:comment><wp:comment_id>8</wp:comment_id>"
            "<wp:comment_parent>abc</wp:comment_parent>"
            "<wp:comment_user_id>n/a</wp:comment_user_id>"
            "</wp:comment></item>"
        )
    )
    (comment,) = post.comments
    assert comment.id == 8
    assert comment.parent_id == "abc"
    assert comment.user_id == 0
    assert comment.meta == ()
    assert comment.author_name == ""


def test_empty_item_degrades_to_defaults():
    (post,) = _posts(wxr("<item/>"))
    assert post.id == 0
    assert post.title == ""
    assert post.author_login == ""
    assert post.assigned_terms == ()
    assert post.meta == ()
    assert post.comments == ()
    assert post.attachment_url is None


def test_posts_keep_document_order_and_author_reference_is_unchecked():
    posts = _posts(FULL_EXPORT)
    assert [p.id for p in posts] == [1, 9]
    assert posts[1].author_login == "ghost"
    assert posts[1].parent_id == 1


def test_excerpt_uses_declared_excerpt_namespace():
    data = (
        b'<rss xmlns:excerpt="http://wordpress.org/export/1.0/excerpt/" '
        b'xmlns:wp="http://wordpress.org/export/1.0/">'
        b"<channel><wp:wxr_version>1.0</wp:wxr_version>"
        b"<item><excerpt:encoded>Short</excerpt:encoded><wp:post_id>3</wp:post_id></item>"
        b"</channel></rss>"
    )
    (post,) = _posts(data)
    assert post.excerpt == "Short"
    assert post.id == 3


def test_no_channel_means_no_posts():
    assert _posts(b"<rss/>") == ()

"""Inline WXR documents shared by the tests."""

WXR_NAMESPACES = (
    'xmlns:excerpt="http://wordpress.org/export/1.2/excerpt/" '
    'xmlns:content="http://purl.org/rss/1.0/modules/content/" '
    'xmlns:wfw="http://wellformedweb.org/CommentAPI/" '
    'xmlns:dc="http://purl.org/dc/elements/1.1/" '
    'xmlns:wp="http://wordpress.org/export/1.2/"'
)


def wxr(channel_body: str, *, version: str = "1.2", namespaces: str = WXR_NAMESPACES) -> bytes:
    """Wrap ``channel_body`` in an RSS channel with a ``wp:wxr_version``."""
    version_el = f"<wp:wxr_version>{version}</wp:wxr_version>" if version is not None else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<rss version="2.0" {namespaces}>\n'
        "<channel>\n"
        "<title>Example Blog</title>\n"
        f"{version_el}\n"
        f"{channel_body}\n"
        "</channel>\n"
        "</rss>\n"
    ).encode("utf-8")


FULL_EXPORT = wxr(
    """
<wp:base_site_url>http://example.com</wp:base_site_url>
<wp:base_blog_url>http://example.com/blog</wp:base_blog_url>
<wp:author>
  <wp:author_id>1</wp:author_id>
  <wp:author_login><![CDATA[admin]]></wp:author_login>
  <wp:author_email><![CDATA[admin@example.com]]></wp:author_email>
  <wp:author_display_name><![CDATA[Site Admin]]></wp:author_display_name>
  <wp:author_first_name><![CDATA[Ada]]></wp:author_first_name>
  <wp:author_last_name><![CDATA[Lovelace]]></wp:author_last_name>
</wp:author>
<wp:category>
  <wp:term_id>3</wp:term_id>
  <wp:category_nicename><![CDATA[news]]></wp:category_nicename>
  <wp:category_parent><![CDATA[]]></wp:category_parent>
  <wp:cat_name><![CDATA[News]]></wp:cat_name>
  <wp:category_description><![CDATA[Company news]]></wp:category_description>
  <wp:termmeta>
    <wp:meta_key><![CDATA[color]]></wp:meta_key>
    <wp:meta_value><![CDATA[blue]]></wp:meta_value>
  </wp:termmeta>
</wp:category>
<wp:tag>
  <wp:term_id>7</wp:term_id>
  <wp:tag_slug><![CDATA[python]]></wp:tag_slug>
  <wp:tag_name><![CDATA[Python]]></wp:tag_name>
</wp:tag>
<wp:term>
  <wp:term_id>12</wp:term_id>
  <wp:term_taxonomy><![CDATA[nav_menu]]></wp:term_taxonomy>
  <wp:term_slug><![CDATA[main-menu]]></wp:term_slug>
  <wp:term_parent><![CDATA[]]></wp:term_parent>
  <wp:term_name><![CDATA[Main Menu]]></wp:term_name>
</wp:term>
<item>
  <title>Hello world!</title>
  <link>http://example.com/hello-world/</link>
  <guid isPermaLink="false">http://example.com/?p=1</guid>
  <dc:creator><![CDATA[admin]]></dc:creator>
  <content:encoded><![CDATA[<p>Welcome to WordPress.</p>]]></content:encoded>
  <excerpt:encoded><![CDATA[Welcome]]></excerpt:encoded>
  <wp:post_id>1</wp:post_id>
  <wp:post_date><![CDATA[2020-01-01 10:00:00]]></wp:post_date>
  <wp:post_date_gmt><![CDATA[2020-01-01 09:00:00]]></wp:post_date_gmt>
  <wp:comment_status><![CDATA[open]]></wp:comment_status>
  <wp:ping_status><![CDATA[open]]></wp:ping_status>
  <wp:post_name><![CDATA[hello-world]]></wp:post_name>
  <wp:status><![CDATA[publish]]></wp:status>
  <wp:post_parent>0</wp:post_parent>
  <wp:menu_order>0</wp:menu_order>
  <wp:post_type><![CDATA[post]]></wp:post_type>
  <wp:post_password><![CDATA[]]></wp:post_password>
  <wp:is_sticky>1</wp:is_sticky>
  <category domain="category" nicename="news"><![CDATA[News]]></category>
  <category domain="post_tag" nicename="python"><![CDATA[Python]]></category>
  <wp:postmeta>
    <wp:meta_key><![CDATA[_edit_last]]></wp:meta_key>
    <wp:meta_value><![CDATA[1]]></wp:meta_value>
  </wp:postmeta>
  <wp:comment>
    <wp:comment_id>5</wp:comment_id>
    <wp:comment_author><![CDATA[A WordPress Commenter]]></wp:comment_author>
    <wp:comment_author_email><![CDATA[wapuu@wordpress.example]]></wp:comment_author_email>
    <wp:comment_author_url>https://wordpress.org/</wp:comment_author_url>
    <wp:comment_author_IP><![CDATA[127.0.0.1]]></wp:comment_author_IP>
    <wp:comment_date><![CDATA[2020-01-02 10:00:00]]></wp:comment_date>
    <wp:comment_date_gmt><![CDATA[2020-01-02 09:00:00]]></wp:comment_date_gmt>
    <wp:comment_content><![CDATA[Hi, this is a comment.]]></wp:comment_content>
    <wp:comment_approved><![CDATA[1]]></wp:comment_approved>
    <wp:comment_type><![CDATA[comment]]></wp:comment_type>
    <wp:comment_parent>0</wp:comment_parent>
    <wp:comment_user_id>0</wp:comment_user_id>
    <wp:commentmeta>
      <wp:meta_key><![CDATA[akismet_result]]></wp:meta_key>
      <wp:meta_value><![CDATA[false]]></wp:meta_value>
    </wp:commentmeta>
  </wp:comment>
</item>
<item>
  <title>logo</title>
  <guid isPermaLink="false">http://example.com/wp-content/uploads/logo.png</guid>
  <dc:creator><![CDATA[ghost]]></dc:creator>
  <wp:post_id>9</wp:post_id>
  <wp:post_parent>1</wp:post_parent>
  <wp:post_type><![CDATA[attachment]]></wp:post_type>
  <wp:attachment_url><![CDATA[http://example.com/wp-content/uploads/logo.png]]></wp:attachment_url>
</item>
""",
)

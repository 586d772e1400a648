"""Tests for <link> discovery in HTML documents."""

import logging

from lxml import html

from semanticlink import HEAD, Link, filter, get_uri
from semanticlink.dom import HtmlLinkSource

PAGE = """<!doctype html>
<html lang="en">
<head>
  <title>Example</title>
  <link rel="api" href="https://api.example.com/" type="application/json" title="API"/>
  <link rel="stylesheet" href="site.css"/>
  <link rel="icon"/>
</head>
<body>
  <div><link rel="api" href="/body-api"/></div>
</body>
</html>
"""


class TestHtmlLinkSource:
    """Tests for HtmlLinkSource."""

    def test_reads_link_attributes(self) -> None:
        links = HtmlLinkSource(PAGE).head().query_links("api")
        assert links[0] == Link(
            rel="api", href="https://api.example.com/", type="application/json", title="API"
        )

    def test_skips_links_without_href(self) -> None:
        rels = [link.rel for link in HtmlLinkSource(PAGE).query_links("*")]
        assert "icon" not in rels

    def test_relative_href_resolved_against_base_url(self) -> None:
        source = HtmlLinkSource(PAGE, base_url="https://example.com/app/")
        assert get_uri(source, "stylesheet") == "https://example.com/app/site.css"

    def test_document_base_element(self) -> None:
        page = '<html><head><base href="https://example.org/"><link rel="up" href="/root"></head></html>'
        assert get_uri(HtmlLinkSource(page), "up") == "https://example.org/root"

    def test_relative_href_without_base_is_kept(self) -> None:
        assert get_uri(HtmlLinkSource(PAGE), "stylesheet") == "site.css"

    def test_whole_document(self) -> None:
        hrefs = [link.href for link in filter(HtmlLinkSource(PAGE), "api")]
        assert hrefs == ["https://api.example.com/", "/body-api"]

    def test_head_only(self) -> None:
        hrefs = [link.href for link in filter(HtmlLinkSource(PAGE).head(), "api")]
        assert hrefs == ["https://api.example.com/"]

    def test_accepts_parsed_element(self) -> None:
        element = html.document_fromstring(PAGE)
        assert len(HtmlLinkSource(element).query_links("api")) == 2

    def test_no_links_logs_debug(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="semanticlink")
        assert HtmlLinkSource("<html><body><p>hi</p></body></html>").query_links("api") == []
        assert [r.levelno for r in caplog.records] == [logging.DEBUG]
        assert "No links found" in caplog.text

    def test_miss_on_empty_document_does_not_warn(self, caplog) -> None:
        source = HtmlLinkSource("<html><head></head><body></body></html>")
        assert get_uri(source, "api", default="none") == "none"
        assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []


class TestHeadIdentifier:
    """The HEAD identifier resolves through a configured head source."""

    def test_get_uri_from_head(self) -> None:
        head = HtmlLinkSource(PAGE).head()
        assert get_uri(HEAD, "api", head=head) == "https://api.example.com/"

    def test_media_type_applies(self) -> None:
        head = HtmlLinkSource(PAGE).head()
        assert get_uri(HEAD, "api", "text/html", "none", head=head) == "none"

"""Discovery of <link> elements in an HTML document.

Typically used to locate the root of an API advertised on a page:

    <head>
      <link rel="api" href="https://api.example.com/"/>
    </head>
"""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from lxml import etree, html

from semanticlink.models import Link
from semanticlink.selectors import RelationshipType

logger = logging.getLogger(__name__)


class HtmlLinkSource:
    """Link source reading the <link> elements of an HTML document or element.

    Relative hrefs are resolved against `base_url`, falling back to the
    document's own <base href> when present.
    """

    def __init__(
        self,
        document: str | bytes | etree._Element,
        base_url: str | None = None,
    ) -> None:
        if isinstance(document, (str, bytes)):
            self.element = html.document_fromstring(document, base_url=base_url)
        else:
            self.element = document
        self.base_url = base_url or self._document_base()

    def _document_base(self) -> str | None:
        bases = self.element.xpath("//base[@href]")
        return bases[0].get("href") if bases else None

    def head(self) -> HtmlLinkSource:
        """Restrict discovery to the <head> element of the document."""
        heads = self.element.xpath("//head")
        if not heads:
            logger.warning("No <head> element found in document")
            return HtmlLinkSource(etree.Element("head"), base_url=self.base_url)
        return HtmlLinkSource(heads[0], base_url=self.base_url)

    def query_links(self, rels: RelationshipType) -> list[Link]:
        """Map the <link> elements below this element into Link objects.

        Every <link> with a rel and href is returned; matching against
        `rels` is left to the resolver.
        """
        links: list[Link] = []
        for el in self.element.iter("link"):
            rel = el.get("rel")
            href = el.get("href")
            if not rel or href is None:
                continue
            if self.base_url:
                href = urljoin(self.base_url, href)
            links.append(
                Link(rel=rel.strip(), href=href, type=el.get("type"), title=el.get("title"))
            )

        if not links:
            logger.debug("No links found in document/element")
        return links

"""
Link resolution: select the links of a source that match a relationship type.

A source of links can be:

    - a list of Link objects (or link mappings straight from JSON)
    - a LinkedRepresentation, or any mapping/object with a 'links' list
    - the magic identifier HEAD, standing in for the <head> of an HTML page
    - a LinkSource, e.g. an HtmlLinkSource over an HTML document

Matched links are ranked by the position of the first selector they
satisfy, so ['primary', 'fallback'] yields the primary links first
regardless of where they sit in the representation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, NamedTuple, Protocol, runtime_checkable

from pydantic import ValidationError

from semanticlink.config import HEAD
from semanticlink.matcher import match_link
from semanticlink.models import Link, LinkedRepresentation
from semanticlink.selectors import LinkSelector, RelationshipType, make_selectors

logger = logging.getLogger(__name__)

# Weight of a link that no selector matches
MAX_WEIGHT = 99999


@runtime_checkable
class LinkSource(Protocol):
    """Protocol for pluggable providers of a flat link list.

    Implementations read links from somewhere other than an in-memory
    representation (for example the <link> elements of an HTML document).
    """

    def query_links(self, rels: RelationshipType) -> list[Link]:
        """Return candidate links for a relationship type.

        Providers may narrow the list using `rels`; the resolver applies the
        full matching rules afterwards either way.
        """
        ...


class WeightedMatch(NamedTuple):
    """A link paired with the index of the first selector it matched."""

    link: Link
    weight: int


def _as_link(item: Any) -> Link | None:
    """Coerce a link entry, returning None for entries that are not links."""
    if isinstance(item, Link):
        return item
    if isinstance(item, Mapping):
        try:
            return Link.model_validate(item)
        except ValidationError as e:
            logger.debug("Skipping malformed link %r: %s", item, e)
    return None


def _weigh(link: Link, selectors: list[LinkSelector]) -> WeightedMatch:
    if link.usable:
        for index, selector in enumerate(selectors):
            if match_link(link, selector):
                return WeightedMatch(link, index)
    return WeightedMatch(link, MAX_WEIGHT)


def filter_links(
    links: Iterable[Link | Mapping],
    rels: RelationshipType,
    media_type: str | None = None,
) -> list[Link]:
    """
    Get the links that match the relationship type and media type.

    Only links with both an href and a rel are considered. When `rels` holds
    several selectors, links are returned grouped in selector order; links
    matched by the same selector keep their original order.

    Args:
        links: Links to search (Link objects or link mappings)
        rels: The relationship type in any supported shape
        media_type: Media type for string/regex relations (default: any)

    Returns:
        List of matching links, best match first

    Raises:
        UnsupportedSelectorError: If rels cannot be normalised
    """
    selectors = make_selectors(rels, media_type)
    candidates = (_as_link(item) for item in links)
    weighted = [_weigh(link, selectors) for link in candidates if link is not None]
    matched = sorted(
        (match for match in weighted if match.weight < MAX_WEIGHT),
        key=lambda match: match.weight,
    )
    return [match.link for match in matched]


def _links_of(source: Any) -> list | None:
    """Return the 'links' list of a representation-like source, if any."""
    if isinstance(source, LinkedRepresentation):
        return source.links
    if isinstance(source, Mapping):
        links = source.get("links")
    else:
        links = getattr(source, "links", None)
    return links if isinstance(links, (list, tuple)) else None


def filter(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    *,
    head: LinkSource | None = None,
) -> list[Link]:
    """
    Filter the links of a source based on a relationship type and media type.

    Args:
        source: The object containing the links, usually a LinkedRepresentation
        rels: The relationship type in any supported shape
        media_type: Media type for string/regex relations (default: any)
        head: Link source used when `source` is the HEAD identifier

    Returns:
        List of matching links, best match first. Sources without links
        (including None and unknown shapes) give an empty list.

    Raises:
        UnsupportedSelectorError: If rels cannot be normalised
    """
    if isinstance(source, (list, tuple)):
        return filter_links(source, rels, media_type)

    if isinstance(source, str):
        if source != HEAD:
            return []
        if head is None:
            logger.warning("No document head available to search for links")
            return []
        return filter_links(head.query_links(rels), rels, media_type)

    if isinstance(source, LinkSource):
        return filter_links(source.query_links(rels), rels, media_type)

    if source is None:
        return []

    links = _links_of(source)
    if links is None:
        # No links member on the object, so nothing matches
        return []
    return filter_links(links, rels, media_type)

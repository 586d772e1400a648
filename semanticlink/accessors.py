"""
Convenience accessors built on the link resolver.

These are pure queries. A miss is a normal outcome: it is logged as a
diagnostic (with the inventory of available links) and turned into a
default value, never an exception.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from semanticlink.config import WILDCARDS
from semanticlink.filter import LinkSource, filter
from semanticlink.models import Link
from semanticlink.selectors import RelationshipType, describe

logger = logging.getLogger(__name__)

SELF_OR_CANONICAL = re.compile(r"self|canonical")


def _link_name(link: Link) -> str:
    if link.type and link.type not in WILDCARDS:
        return f'"{link.rel}" ({link.type})'
    if link.rel and SELF_OR_CANONICAL.search(link.rel):
        return f'"self: {link.href}"'
    return f'"{link.rel}"'


def make_not_found_message(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    head: LinkSource | None = None,
) -> str:
    """Build a readable message listing what was asked for and what is available."""
    available = filter(source, "*", "*", head=head)
    media_type_details = f" ({media_type})" if media_type else ""
    names = ", ".join(_link_name(link) for link in available)
    return (
        f"The semantic interface '{describe(rels)}'{media_type_details} is not available. "
        f"{len(available)} available links include {names}"
    )


def _log_not_found(
    source: Any,
    rels: RelationshipType,
    media_type: str | None,
    head: LinkSource | None,
    log: logging.Logger | None,
) -> None:
    log = log or logger
    if source is None:
        log.error("Null or invalid object provided with semantic links information")
    elif log.isEnabledFor(logging.DEBUG):
        log.debug(make_not_found_message(source, rels, media_type, head))


def get_link(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    default: Link | None = None,
    *,
    head: LinkSource | None = None,
    logger: logging.Logger | None = None,
) -> Link | None:
    """
    Get the first link that matches, or `default` if there is no match.

    Args:
        source: The object containing the links, usually a LinkedRepresentation
        rels: The relationship type in any supported shape
        media_type: Media type for string/regex relations (default: any)
        default: Value returned when no link matches
        head: Link source used when `source` is the HEAD identifier
        logger: Diagnostic sink for misses (default: module logger)
    """
    links = filter(source, rels, media_type, head=head)
    if links:
        return links[0]
    _log_not_found(source, rels, media_type, head, logger)
    return default


def get_uri(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    default: str | None = None,
    *,
    head: LinkSource | None = None,
    logger: logging.Logger | None = None,
) -> str | None:
    """
    Get the href of the first link that matches, or `default` if there is no match.

    Example:
        >>> get_uri({"links": [{"rel": "self", "href": "/1"}]}, "self")
        '/1'
    """
    link = get_link(source, rels, media_type, head=head, logger=logger)
    return link.href if link else default


def get_title(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    *,
    head: LinkSource | None = None,
    logger: logging.Logger | None = None,
) -> str:
    """Get the title of the first link that matches; empty string if absent or unmatched."""
    link = get_link(source, rels, media_type, head=head, logger=logger)
    return (link.title or "") if link else ""


def matches(
    source: Any,
    rels: RelationshipType,
    media_type: str | None = None,
    *,
    head: LinkSource | None = None,
) -> bool:
    """Query whether the source has one or more links matching the criteria."""
    return len(filter(source, rels, media_type, head=head)) > 0

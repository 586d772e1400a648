"""
Matching of a single link against a single selector.

The same field matcher is used for the relation, the media type and the
title, so wildcard and regular expression semantics are identical across
all three.
"""

import re

from semanticlink.config import WILDCARDS
from semanticlink.models import Link
from semanticlink.selectors import LinkSelector, Pattern


def match_field(value: str, pattern: Pattern) -> bool:
    """
    Match a link field (rel, type or title) against a selector pattern.

    A value matches if:
      - the pattern is a regular expression found anywhere in the (non-empty) value
      - the pattern is the wildcard '*' or '*/*'
      - the value is '*/*' (the link accepts any request)
      - the value equals the pattern
    """
    if isinstance(pattern, re.Pattern) and value and pattern.search(value):
        return True
    return pattern in WILDCARDS or value == "*/*" or value == pattern


def match_link(link: Link, selector: LinkSelector) -> bool:
    """Check whether a link satisfies every constraint of a selector."""
    if not match_field(link.rel, selector.rel):
        return False

    title_ok = selector.title is None or match_field(link.title or "", selector.title)
    media_type_ok = selector.media_type is None or match_field(
        link.type or "", selector.media_type
    )
    return title_ok and media_type_ok

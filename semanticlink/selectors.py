"""
Link selectors and their normalisation.

A relationship type can be given in several shapes:

    - an exact string: 'self'
    - a magic wildcard string: '*'
    - a compiled regular expression: re.compile(r'self|canonical')
    - a list of strings/regular expressions: ['self', 'first']
    - a structured LinkSelector (or a mapping with a 'rel' key)
    - a list of structured selectors

All of them are normalised into an ordered list of LinkSelector. The order
is significant: it is the weight used to rank matched links.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

# A string, wildcard or compiled regular expression
Pattern = Union[str, re.Pattern]

RelationshipType = Union[Pattern, "LinkSelector", Mapping, list, tuple]


class UnsupportedSelectorError(TypeError):
    """Raised when a relationship type cannot be normalised into selectors."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Unsupported link relationship selector: {type(value).__name__} {value!r}"
        )


@dataclass(frozen=True)
class LinkSelector:
    """
    Search criteria for selecting links.

    Attributes:
        rel: Mandatory link relation name, wildcard or regular expression
        media_type: Optional media type to match (None means not required)
        title: Optional title to match (None means not required)
    """

    rel: Pattern
    media_type: Pattern | None = None
    title: Pattern | None = None

    def __post_init__(self) -> None:
        # An empty media type constrains nothing
        if self.media_type == "":
            object.__setattr__(self, "media_type", None)

    @classmethod
    def from_mapping(cls, data: Mapping) -> LinkSelector:
        """Create a selector from a mapping such as {'rel': 'tags', 'title': 't2'}."""
        media_type = data.get("media_type", data.get("mediaType"))
        return cls(rel=data["rel"], media_type=media_type, title=data.get("title"))


def is_link_selector(item: Any) -> bool:
    """Check whether an item is a structured selector.

    A LinkSelector, or any mapping carrying a 'rel' key, qualifies.
    """
    if isinstance(item, LinkSelector):
        return True
    return isinstance(item, Mapping) and item.get("rel") is not None


def _as_link_selector(item: LinkSelector | Mapping) -> LinkSelector:
    if isinstance(item, LinkSelector):
        return item
    return LinkSelector.from_mapping(item)


def _is_pattern(item: Any) -> bool:
    return isinstance(item, (str, re.Pattern))


def make_selectors(
    rels: RelationshipType,
    media_type: str | None = None,
) -> list[LinkSelector]:
    """
    Normalise a relationship type into an ordered list of LinkSelector.

    Single strings and regular expressions become a singleton with the
    legacy positional media type attached. A structured selector keeps its
    own media type and title; the positional media type is ignored.

    Lists are converted element-wise. A homogeneous list of structured
    selectors is returned in the same order.

    Args:
        rels: The relationship type in any supported shape
        media_type: Legacy media type applied to string/regex relations

    Returns:
        List of LinkSelector in precedence order

    Raises:
        UnsupportedSelectorError: If rels (or one of its elements) has an
            unsupported shape
    """
    if _is_pattern(rels):
        return [LinkSelector(rel=rels, media_type=media_type)]

    if is_link_selector(rels):
        return [_as_link_selector(rels)]

    if isinstance(rels, (list, tuple)):
        if all(is_link_selector(item) for item in rels):
            return [_as_link_selector(item) for item in rels]

        selectors: list[LinkSelector] = []
        for item in rels:
            if _is_pattern(item):
                selectors.append(LinkSelector(rel=item, media_type=media_type))
            elif is_link_selector(item):
                selectors.append(_as_link_selector(item))
            else:
                raise UnsupportedSelectorError(item)
        return selectors

    raise UnsupportedSelectorError(rels)


def describe(rels: RelationshipType) -> str:
    """Render a relationship type for diagnostics."""
    if isinstance(rels, re.Pattern):
        return f"/{rels.pattern}/"
    if isinstance(rels, LinkSelector):
        parts = [describe(rels.rel)]
        if rels.media_type is not None:
            parts.append(f"type={describe(rels.media_type)}")
        if rels.title is not None:
            parts.append(f"title={describe(rels.title)}")
        return " ".join(parts)
    if isinstance(rels, Mapping) and "rel" in rels:
        return describe(LinkSelector.from_mapping(rels))
    if isinstance(rels, (list, tuple)):
        return ",".join(describe(item) for item in rels)
    return str(rels)

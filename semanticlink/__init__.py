"""
semanticlink - Resolve the links that form the semantic interface of a resource.

This library provides:
- Pydantic models for links and linked representations
- Link selectors (string, regular expression, structured, or lists of them)
- Weighted link resolution with media type and title disambiguation
- Accessors for the uri/title of the best matching link
- A requests-based transport for performing HTTP verbs on resolved links

Import patterns:

    # Primary API (recommended)
    from semanticlink import LinkedRepresentation, filter, get_uri, matches

    # Full submodule imports
    from semanticlink.selectors import LinkSelector, make_selectors
    from semanticlink.http import HttpClient

Example usage:

    import re
    from semanticlink import LinkSelector, get_uri

    representation = {"links": [
        {"rel": "self", "href": "https://api.example.com/1"},
        {"rel": "tags", "href": "https://api.example.com/1/tags", "type": "text/uri-list"},
    ]}

    get_uri(representation, "self")
    get_uri(representation, re.compile(r"^tags$"), "text/uri-list")
    get_uri(representation, [LinkSelector(rel="edit"), "self"])
"""

from semanticlink.accessors import get_link, get_title, get_uri, matches
from semanticlink.config import HEAD
from semanticlink.filter import LinkSource, filter, filter_links
from semanticlink.models import (
    CollectionRepresentation,
    FeedItemRepresentation,
    FeedRepresentation,
    Link,
    LinkedRepresentation,
)
from semanticlink.selectors import LinkSelector, UnsupportedSelectorError, make_selectors

__version__ = "1.0.8"

# Primary public API
__all__ = [
    "HEAD",
    "Link",
    "LinkedRepresentation",
    "FeedItemRepresentation",
    "FeedRepresentation",
    "CollectionRepresentation",
    "LinkSelector",
    "LinkSource",
    "UnsupportedSelectorError",
    "make_selectors",
    "filter",
    "filter_links",
    "get_link",
    "get_title",
    "get_uri",
    "matches",
]

# Note: the HTTP transport and HTML discovery are opt-in submodules:
#   from semanticlink.http import HttpClient
#   from semanticlink.dom import HtmlLinkSource

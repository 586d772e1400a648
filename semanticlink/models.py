"""
Core Pydantic models for hypermedia representations.

These names are based on the Atom Publishing Protocol and Syndication
(micro)format: a representation carries a list of typed links that form
its semantic interface.

See:
  - https://tools.ietf.org/html/rfc5023
  - https://tools.ietf.org/html/rfc4287
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Self

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

logger = logging.getLogger(__name__)


class Link(BaseModel):
    """
    A single typed link.

    Attributes:
        rel: Well known (or custom) relationship type e.g. `self`, `item`, `edit-form`
        href: The URI on which to perform HTTP verbs
        type: Optional media type e.g. `application/json`, `text/uri-list`
        title: Optional string for human readable or machine categorisation
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    rel: str = ""
    href: str = ""
    type: str | None = None
    title: str | None = None

    @property
    def usable(self) -> bool:
        """True if the link has both a relation and an href."""
        return bool(self.rel and self.href)


class LinkedRepresentation(BaseModel):
    """
    A representation of a resource with links.

    Domain fields beyond `links` are kept as extra attributes and ignored
    when resolving links.
    """

    model_config = ConfigDict(extra="allow")

    links: list[Link] = []

    @field_validator("links", mode="before")
    @classmethod
    def _drop_malformed_links(cls, value):
        """Keep the entries that are valid links; a bad link never rejects the representation."""
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            logger.debug("Ignoring links that are not a list: %r", value)
            return []
        links = []
        for item in value:
            try:
                links.append(Link.model_validate(item))
            except ValidationError as e:
                logger.debug("Skipping malformed link %r: %s", item, e)
        return links

    @classmethod
    def from_json(cls, json_text: str | bytes) -> Self:
        """Load a representation from JSON text."""
        return cls.model_validate(json.loads(json_text))

    @classmethod
    def from_yaml(cls, yaml_text: str) -> Self:
        """
        Load a representation from YAML text.

        Example:
            representation = LinkedRepresentation.from_yaml('''
                links:
                  - rel: self
                    href: https://api.example.com/1
            ''')
        """
        return cls.model_validate(yaml.safe_load(yaml_text) or {})

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load a representation from a JSON or YAML file (by suffix)."""
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            return cls.from_json(text)
        return cls.from_yaml(text)


class FeedItemRepresentation(BaseModel):
    """
    An entry of a feed.

    Attributes:
        id: URI of the resource in the collection (machine-readable identity)
        title: Title of the resource (human-readable identity)
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str | None = None


class FeedRepresentation(LinkedRepresentation):
    """
    A feed resource: a collection as sparsely populated entries.

    The links may contain `next`, `previous`, `first` and `last`.
    """

    items: list[FeedItemRepresentation] = []


class CollectionRepresentation(LinkedRepresentation):
    """A collection resource whose items are themselves linked representations."""

    items: list[LinkedRepresentation] = []

"""
HTTP transport over resolved links.

Each call resolves at most one link (the best match) from the source and
issues a single request against its href:

    from semanticlink import http

    response = http.get(representation, "self")
    http.put(representation, "edit", {"name": "x"}, "application/json")
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from semanticlink.accessors import get_link
from semanticlink.config import HTTP_TIMEOUT, is_wildcard
from semanticlink.filter import LinkSource
from semanticlink.models import Link
from semanticlink.selectors import RelationshipType

logger = logging.getLogger(__name__)


class InterfaceNotAvailableError(LookupError):
    """Raised when the source has no link for a required HTTP action."""

    def __init__(self, rels: RelationshipType) -> None:
        self.rels = rels
        super().__init__("The resource doesn't support the required interface")


class RequestCancelledError(RuntimeError):
    """Raised when a request is attempted with a cancelled token."""


class CancelToken:
    """Advisory, thread-safe cancellation handle passed through to requests."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self.reason: str | None = None

    def cancel(self, reason: str = "Request cancelled") -> None:
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise RequestCancelledError(self.reason)


def _fallback_response(url: str, data: Any) -> requests.Response:
    """Build a synthetic 200 response carrying `data` as its JSON body."""
    response = requests.Response()
    response.status_code = 200
    response.url = url
    response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
    response._content = json.dumps(data).encode("utf-8")
    response.encoding = "utf-8"
    return response


class HttpClient:
    """Performs HTTP verbs against links resolved from a representation.

    Args:
        session: requests.Session to use (defaults, adapters, auth, hooks)
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(
        self,
        verb: str,
        link: Link,
        content: Any = None,
        content_type: str | None = None,
        cancel_token: CancelToken | None = None,
        **options: Any,
    ) -> requests.Response:
        """Issue a request against a link's href.

        Raises:
            RequestCancelledError: If the token was cancelled beforehand
            requests.HTTPError: If the response status is an error
        """
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        logger.debug("Request [%s] '%s'", verb, link.href)

        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if content is not None:
            if isinstance(content, (str, bytes)):
                kwargs["data"] = content
            else:
                kwargs["json"] = content
            content_type = content_type or link.type
            if not is_wildcard(content_type):
                kwargs["headers"] = {"Content-Type": content_type}
        kwargs.update(options)

        response = self.session.request(verb, link.href, **kwargs)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise requests.HTTPError(
                f"{verb} {link.href} failed: {e}", response=response
            ) from e
        return response

    def _link(
        self,
        source: Any,
        rels: RelationshipType,
        verb: str,
        content: Any = None,
        content_type: str | None = None,
        head: LinkSource | None = None,
        **options: Any,
    ) -> requests.Response:
        link = get_link(source, rels, head=head)
        if link is None:
            raise InterfaceNotAvailableError(rels)
        return self.request(verb, link, content, content_type, **options)

    def get(self, source: Any, rels: RelationshipType, **options: Any) -> requests.Response:
        """GET the resource behind the matching link."""
        return self._link(source, rels, "GET", **options)

    def try_get(
        self,
        source: Any,
        rels: RelationshipType,
        default: Any = None,
        **options: Any,
    ) -> requests.Response:
        """GET the resource behind the matching link, never failing on a missing link.

        Without a matching link a synthetic 200 response is returned whose
        JSON body is `default`. It was never sent, so it has no `request`
        and no `raw` stream.
        """
        link = get_link(source, rels, head=options.pop("head", None))
        if link is None:
            return _fallback_response("", default)
        return self.request("GET", link, **options)

    def put(
        self,
        source: Any,
        rels: RelationshipType,
        content: Any,
        content_type: str | None = None,
        **options: Any,
    ) -> requests.Response:
        """PUT content to the matching link."""
        return self._link(source, rels, "PUT", content, content_type, **options)

    def post(
        self,
        source: Any,
        rels: RelationshipType,
        content: Any = None,
        content_type: str | None = None,
        **options: Any,
    ) -> requests.Response:
        """POST content to the matching link."""
        return self._link(source, rels, "POST", content, content_type, **options)

    def patch(
        self,
        source: Any,
        rels: RelationshipType,
        content: Any = None,
        content_type: str | None = None,
        **options: Any,
    ) -> requests.Response:
        """PATCH the matching link."""
        return self._link(source, rels, "PATCH", content, content_type, **options)

    def delete(self, source: Any, rels: RelationshipType, **options: Any) -> requests.Response:
        """DELETE the resource behind the matching link."""
        return self._link(source, rels, "DELETE", **options)


# Client used by the module-level verbs
default_client = HttpClient()


def use_session(session: requests.Session) -> None:
    """Make the module-level verbs use the given session.

    Defaults, adapters and auth configured on the session then apply to
    every call made through this module.
    """
    default_client.session = session


def get(source: Any, rels: RelationshipType, **options: Any) -> requests.Response:
    return default_client.get(source, rels, **options)


def try_get(source: Any, rels: RelationshipType, default: Any = None, **options: Any) -> requests.Response:
    return default_client.try_get(source, rels, default, **options)


def put(
    source: Any, rels: RelationshipType, content: Any, content_type: str | None = None, **options: Any
) -> requests.Response:
    return default_client.put(source, rels, content, content_type, **options)


def post(
    source: Any, rels: RelationshipType, content: Any = None, content_type: str | None = None, **options: Any
) -> requests.Response:
    return default_client.post(source, rels, content, content_type, **options)


def patch(
    source: Any, rels: RelationshipType, content: Any = None, content_type: str | None = None, **options: Any
) -> requests.Response:
    return default_client.patch(source, rels, content, content_type, **options)


def delete(source: Any, rels: RelationshipType, **options: Any) -> requests.Response:
    return default_client.delete(source, rels, **options)

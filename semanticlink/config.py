"""Shared configuration for the semanticlink package."""

import re

# Media types that never filter out a link
WILDCARDS = ("*", "*/*")

# Magic source value standing in for the <head> element of an HTML page
HEAD = "HEAD"

# HTTP timeout in seconds for the transport adapter
HTTP_TIMEOUT = 10

# Media type pattern: type/subtype, no parameters (no q values)
MEDIA_TYPE_PATTERN = re.compile(r"^[\w.+-]+/[\w.+-]+$")


def is_wildcard(media_type: str | None) -> bool:
    """Return True when a media type never constrains a match.

    None, the empty string, ``*`` and ``*/*`` are all equivalent.
    """
    return not media_type or media_type in WILDCARDS


def validate_media_type(media_type: str | None) -> None:
    """Validate media type format.

    Args:
        media_type: The media type to validate

    Raises:
        ValueError: If media type format is invalid
    """
    if is_wildcard(media_type):
        return
    if not MEDIA_TYPE_PATTERN.match(media_type):
        raise ValueError(
            f"Invalid media type: '{media_type}'. Expected type/subtype (e.g., application/json)"
        )

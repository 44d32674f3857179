"""URL normalization and validation for incoming analysis requests."""

import re
from urllib.parse import urlparse

URL_REQUIRED = "URL is required"
URL_INVALID = "Invalid URL format. Please provide a valid HTTP or HTTPS URL."

ALLOWED_SCHEMES = {"http", "https"}
_SCHEME_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_BARE_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):(.*)$")


class InvalidURLError(ValueError):
    """Raised when a submitted URL cannot be analyzed."""


def normalize_url(raw: str | None) -> str:
    """
    Return `raw` as an absolute http(s) URL, defaulting to https:// when no
    scheme is given. Raises InvalidURLError for anything else.
    """
    value = (raw or "").strip()
    if not value:
        raise InvalidURLError(URL_REQUIRED)

    if not _SCHEME_PREFIX.match(value):
        # "mailto:x", "javascript:x" carry a scheme; "host:8080" does not.
        bare = _BARE_SCHEME.match(value)
        if bare and not bare.group(2)[:1].isdigit():
            raise InvalidURLError(URL_INVALID)
        value = f"https://{value}"

    if any(ch.isspace() for ch in value):
        raise InvalidURLError(URL_INVALID)

    try:
        parsed = urlparse(value)
        if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.hostname:
            raise InvalidURLError(URL_INVALID)
        parsed.port
    except ValueError:
        raise InvalidURLError(URL_INVALID) from None

    return value

"""Network access for the analyzer: timed page fetch and existence probes.

Neither operation retries. Transport problems come back as values, never as
exceptions.
"""

import logging
import time
from urllib.parse import urlparse, urlunparse

import requests

from config import FETCH_TIMEOUT_SECONDS, PROBE_TIMEOUT_SECONDS, REQUEST_HEADERS
from models import FetchFailure, FetchOutcome, FetchSuccess

logger = logging.getLogger(__name__)

ROBOTS_PATH = "/robots.txt"
SITEMAP_PATH = "/sitemap.xml"


def fetch_page(url: str, timeout: float = FETCH_TIMEOUT_SECONDS) -> FetchOutcome:
    """
    GET `url` and measure how long the full response took.
    Non-2xx responses are still a FetchSuccess; only transport errors fail.
    """
    start = time.perf_counter()
    try:
        response = requests.get(url, timeout=timeout, headers=REQUEST_HEADERS)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        response.encoding = response.apparent_encoding or "utf-8"
        body = response.text
    except requests.Timeout:
        reason = f"Request timed out after {timeout:g} seconds"
        logger.warning("Error fetching main page %s: %s", url, reason)
        return FetchFailure(reason=reason)
    except (requests.RequestException, ValueError, OSError) as exc:
        logger.warning("Error fetching main page %s: %s", url, exc)
        return FetchFailure(reason=str(exc) or exc.__class__.__name__)

    return FetchSuccess(body=body, http_status=response.status_code, elapsed_ms=elapsed_ms)


def build_probe_url(url: str, path: str) -> str:
    """Keep scheme and host (with port) of `url`, replace everything else with `path`."""
    parsed = urlparse(url)
    host = parsed.netloc.rsplit("@", 1)[-1]
    if not parsed.scheme or not host:
        raise ValueError(f"Cannot derive {path} location from {url!r}")
    return urlunparse((parsed.scheme, host, path, "", "", ""))


def probe_exists(url: str, timeout: float = PROBE_TIMEOUT_SECONDS) -> bool:
    """
    HEAD `url` and report whether it answered 200.
    404s, other statuses and transport errors are all just False.
    """
    try:
        response = requests.head(
            url,
            timeout=timeout,
            headers=REQUEST_HEADERS,
            allow_redirects=True,
        )
    except (requests.RequestException, ValueError, OSError) as exc:
        logger.info("Error checking existence of %s: %s", url, exc)
        return False

    if response.status_code != 200:
        logger.info("Existence check for %s returned HTTP %s", url, response.status_code)
        return False
    return True

"""Document inspector: extract head-scoped SEO signals from fetched markup.

Only looks inside the first <head>. Never raises on malformed markup; the worst
case is an empty extraction.
"""

import re

from bs4 import BeautifulSoup

from models import PageSignals

_DESCRIPTION_NAME = re.compile(r"^\s*description\s*$", re.I)
_VIEWPORT_NAME = re.compile(r"^\s*viewport\s*$", re.I)


def empty_signals() -> PageSignals:
    return {"title": "", "description": None, "has_viewport": False}


def inspect_document(html: str) -> PageSignals:
    """Return title text, description content and viewport presence for `html`."""
    try:
        soup = BeautifulSoup(html or "", "lxml")
    except Exception:
        return empty_signals()

    head = soup.head
    if head is None:
        return empty_signals()

    # --- Title ---
    title = ""
    title_tag = head.find("title")
    if title_tag is not None:
        title = title_tag.get_text().strip()

    # --- Meta description ---
    description = None
    desc_tag = head.find("meta", attrs={"name": _DESCRIPTION_NAME})
    if desc_tag is not None and desc_tag.get("content") is not None:
        description = str(desc_tag["content"]).strip()

    # --- Viewport meta ---
    has_viewport = head.find("meta", attrs={"name": _VIEWPORT_NAME}) is not None

    return {
        "title": title,
        "description": description,
        "has_viewport": has_viewport,
    }

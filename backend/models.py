"""Data models and types used between the analysis stages.

API request/response shapes are in schemas.py.
"""

from dataclasses import dataclass
from typing import TypedDict, Union


@dataclass(frozen=True)
class FetchSuccess:
    """Main page was retrieved. Any HTTP status counts, not only 2xx."""

    body: str
    http_status: int
    elapsed_ms: int


@dataclass(frozen=True)
class FetchFailure:
    """Main page could not be retrieved at the transport level."""

    reason: str


FetchOutcome = Union[FetchSuccess, FetchFailure]


class PageSignals(TypedDict):
    """Head-scoped signals extracted from fetched markup."""

    title: str
    description: str | None
    has_viewport: bool

"""Pydantic schemas for API request/response."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Status(str, Enum):
    """Tri-state verdict of a single check."""

    PASS = "Pass"
    WARNING = "Warning"
    FAIL = "Fail"


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze."""

    url: str = ""

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url_field(cls, value: object) -> str:
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError("URL must be a string")
        return value.strip()


class CheckVerdict(BaseModel):
    """Outcome of one check. content/length are only set for title and description."""

    status: Status
    details: str
    content: str | None = None
    length: int | None = None


# Fixed enumeration of checks, in evaluation and report order.
CHECK_NAMES = (
    "page_load_time",
    "meta_title",
    "meta_description",
    "mobile_friendly",
    "robots_txt",
    "sitemap_xml",
)


class Report(BaseModel):
    """Verdict per check, serialized with camelCase keys (pageLoadTime, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page_load_time: CheckVerdict | None = None
    meta_title: CheckVerdict | None = None
    meta_description: CheckVerdict | None = None
    mobile_friendly: CheckVerdict | None = None
    robots_txt: CheckVerdict | None = None
    sitemap_xml: CheckVerdict | None = None


class AnalysisResult(BaseModel):
    """Response for POST /analyze."""

    url: str
    score: int = Field(ge=0, le=100)
    report: Report
    recommendations: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body for rejected requests."""

    error: str

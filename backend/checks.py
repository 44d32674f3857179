"""Check evaluator: turn raw page signals into verdicts and recommendations.

Every check returns a (verdict, recommendation) pair. The recommendation is
None for Pass verdicts and for content checks forced to Fail because the page
could not be fetched.
"""

from models import FetchFailure, FetchOutcome
from schemas import CheckVerdict, Status

FAST_LOAD_MS = 1000
SLOW_LOAD_MS = 3000
TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 120
DESCRIPTION_MAX_LENGTH = 160

CONTENT_UNAVAILABLE = "Could not retrieve page content."
VIEWPORT_EXAMPLE = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'

CheckResult = tuple[CheckVerdict, str | None]


def check_page_load(outcome: FetchOutcome, url: str) -> CheckResult:
    if isinstance(outcome, FetchFailure):
        return (
            CheckVerdict(status=Status.FAIL, details=f"Failed to fetch page: {outcome.reason}"),
            f"Could not fetch the page at {url}. Check the URL for typos and ensure the server is accessible.",
        )

    elapsed = outcome.elapsed_ms
    http_status = outcome.http_status
    details = f"Fetched in {elapsed}ms (HTTP Status: {http_status})"

    if http_status != 200:
        return (
            CheckVerdict(status=Status.FAIL, details=details),
            f"The page returned an HTTP status code of {http_status}. "
            "Ensure your page is accessible and returns a 200 OK status.",
        )
    if elapsed < FAST_LOAD_MS:
        return CheckVerdict(status=Status.PASS, details=details), None
    if elapsed < SLOW_LOAD_MS:
        return (
            CheckVerdict(status=Status.WARNING, details=details),
            f"The page took {elapsed}ms to load. Aim for under {FAST_LOAD_MS}ms by reducing "
            "server response time and page weight.",
        )
    return (
        CheckVerdict(status=Status.FAIL, details=details),
        f"The page took {elapsed}ms to load, which is over {SLOW_LOAD_MS}ms. Optimize server "
        "response time, caching and asset size to bring it under "
        f"{FAST_LOAD_MS}ms.",
    )


def check_title(title: str) -> CheckResult:
    length = len(title)
    if not title:
        return (
            CheckVerdict(
                status=Status.FAIL,
                details="Meta Title is missing or empty.",
                content=title,
                length=length,
            ),
            "Add a descriptive meta title to your page.",
        )
    if length < TITLE_MIN_LENGTH or length > TITLE_MAX_LENGTH:
        return (
            CheckVerdict(
                status=Status.WARNING,
                details=(
                    f"Meta Title is {length} characters long. Recommended length is "
                    f"{TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters."
                ),
                content=title,
                length=length,
            ),
            f"Adjust the length of your meta title (currently {length} characters) to the recommended "
            f"{TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH} characters.",
        )
    return (
        CheckVerdict(
            status=Status.PASS,
            details=f'Meta Title found: "{title}" ({length} characters).',
            content=title,
            length=length,
        ),
        None,
    )


def check_description(description: str | None) -> CheckResult:
    length = len(description) if description else 0
    if not description:
        return (
            CheckVerdict(
                status=Status.FAIL,
                details="Meta Description is missing or empty.",
                content=description,
                length=length,
            ),
            "Add a compelling meta description to your page.",
        )
    if length < DESCRIPTION_MIN_LENGTH or length > DESCRIPTION_MAX_LENGTH:
        return (
            CheckVerdict(
                status=Status.WARNING,
                details=(
                    f"Meta Description is {length} characters long. Recommended length is "
                    f"{DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} characters."
                ),
                content=description,
                length=length,
            ),
            f"Adjust the length of your meta description (currently {length} characters) to the recommended "
            f"{DESCRIPTION_MIN_LENGTH}-{DESCRIPTION_MAX_LENGTH} characters.",
        )
    return (
        CheckVerdict(
            status=Status.PASS,
            details=f'Meta Description found: "{description}" ({length} characters).',
            content=description,
            length=length,
        ),
        None,
    )


def check_viewport(has_viewport: bool) -> CheckResult:
    if has_viewport:
        return CheckVerdict(status=Status.PASS, details="Viewport meta tag found."), None
    return (
        CheckVerdict(
            status=Status.WARNING,
            details="Viewport meta tag missing. This is a basic check; consider a full mobile-friendly test.",
        ),
        f"Add a viewport meta tag (e.g., {VIEWPORT_EXAMPLE}) for better mobile rendering.",
    )


def content_unavailable() -> CheckResult:
    """Forced verdict for title/description/viewport when the page was not fetched."""
    return CheckVerdict(status=Status.FAIL, details=CONTENT_UNAVAILABLE), None


def check_robots(found: bool | None, robots_url: str | None) -> CheckResult:
    """`found` is None when the probe could not be run at all."""
    if found is None:
        return (
            CheckVerdict(status=Status.FAIL, details="Failed to check robots.txt."),
            "Could not check for robots.txt. Ensure the domain is accessible.",
        )
    if found:
        return CheckVerdict(status=Status.PASS, details=f"robots.txt found at {robots_url}"), None
    return (
        CheckVerdict(status=Status.WARNING, details=f"robots.txt not found at {robots_url}"),
        "Consider creating a robots.txt file to guide search engine crawlers.",
    )


def check_sitemap(found: bool | None, sitemap_url: str | None) -> CheckResult:
    """`found` is None when the probe could not be run at all."""
    if found is None:
        return (
            CheckVerdict(status=Status.FAIL, details="Failed to check sitemap.xml."),
            "Could not check for sitemap.xml. Ensure the domain is accessible.",
        )
    if found:
        return CheckVerdict(status=Status.PASS, details=f"sitemap.xml found at {sitemap_url}"), None
    return (
        CheckVerdict(
            status=Status.FAIL,
            details=f"sitemap.xml not found at {sitemap_url}. (Checked common location)",
        ),
        "Create an XML sitemap and submit it to search engines like Google and Bing.",
    )

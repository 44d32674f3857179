"""Single-page analysis pipeline and report assembly.

Pipeline: fetch main page, inspect head only if the fetch succeeded, probe
robots.txt and sitemap.xml regardless, evaluate all six checks, score, and
assemble the result. A failed stage only degrades its own checks.
"""

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Callable

import checks
from fetcher import ROBOTS_PATH, SITEMAP_PATH, build_probe_url, fetch_page, probe_exists
from inspector import inspect_document
from models import FetchOutcome, FetchSuccess, PageSignals
from schemas import CHECK_NAMES, AnalysisResult, Report
from scoring import compute_score

logger = logging.getLogger(__name__)

FetchFn = Callable[[str], FetchOutcome]
ProbeFn = Callable[[str], bool]
InspectFn = Callable[[str], PageSignals]


def assemble_result(url: str, results: dict[str, checks.CheckResult]) -> AnalysisResult:
    """Combine per-check results into the response, in fixed check order."""
    verdicts = {}
    recommendations: list[str] = []
    for name in CHECK_NAMES:
        if name not in results:
            continue
        verdict, recommendation = results[name]
        verdicts[name] = verdict
        if recommendation:
            recommendations.append(recommendation)

    report = Report(**verdicts)
    return AnalysisResult(
        url=url,
        score=compute_score(report),
        report=report,
        recommendations=recommendations,
    )


class SiteAnalyzer:
    """Runs the six SEO checks against one URL.

    Network and parsing collaborators are injectable so callers (and tests)
    can substitute them. With `concurrent=True` the page fetch and both
    probes are issued in parallel; the result is the same either way.
    """

    def __init__(
        self,
        fetch: FetchFn = fetch_page,
        probe: ProbeFn = probe_exists,
        inspect: InspectFn = inspect_document,
        concurrent: bool = False,
    ) -> None:
        self.fetch = fetch
        self.probe = probe
        self.inspect = inspect
        self.concurrent = concurrent

    def _probe_path(self, url: str, path: str) -> tuple[str | None, bool | None]:
        try:
            probe_url = build_probe_url(url, path)
        except ValueError as exc:
            logger.error("Error checking %s for %s: %s", path, url, exc)
            return None, None
        return probe_url, self.probe(probe_url)

    def _gather(self, url: str):
        if not self.concurrent:
            return (
                self.fetch(url),
                self._probe_path(url, ROBOTS_PATH),
                self._probe_path(url, SITEMAP_PATH),
            )
        with ThreadPoolExecutor(max_workers=3) as pool:
            page = pool.submit(self.fetch, url)
            robots = pool.submit(self._probe_path, url, ROBOTS_PATH)
            sitemap = pool.submit(self._probe_path, url, SITEMAP_PATH)
            return page.result(), robots.result(), sitemap.result()

    def analyze(self, url: str) -> AnalysisResult:
        """Analyze an already-normalized URL. Never raises for network problems."""
        logger.info("Analyzing URL: %s", url)
        outcome, (robots_url, robots_found), (sitemap_url, sitemap_found) = self._gather(url)

        results: dict[str, checks.CheckResult] = {
            "page_load_time": checks.check_page_load(outcome, url),
        }
        if isinstance(outcome, FetchSuccess):
            signals = self.inspect(outcome.body)
            results["meta_title"] = checks.check_title(signals["title"])
            results["meta_description"] = checks.check_description(signals["description"])
            results["mobile_friendly"] = checks.check_viewport(signals["has_viewport"])
        else:
            results["meta_title"] = checks.content_unavailable()
            results["meta_description"] = checks.content_unavailable()
            results["mobile_friendly"] = checks.content_unavailable()
        results["robots_txt"] = checks.check_robots(robots_found, robots_url)
        results["sitemap_xml"] = checks.check_sitemap(sitemap_found, sitemap_url)

        result = assemble_result(url, results)
        logger.info("Analysis of %s finished with score %s", url, result.score)
        return result

"""Normalize check verdicts into a 0-100 score."""

from schemas import CHECK_NAMES, Report, Status

POINTS: dict[str, dict[Status, int]] = {
    "page_load_time": {Status.PASS: 15, Status.WARNING: 5, Status.FAIL: 0},
    "meta_title": {Status.PASS: 10, Status.WARNING: 3, Status.FAIL: 0},
    "meta_description": {Status.PASS: 10, Status.WARNING: 3, Status.FAIL: 0},
    "mobile_friendly": {Status.PASS: 5, Status.WARNING: 1, Status.FAIL: 0},
    "robots_txt": {Status.PASS: 5, Status.WARNING: 2, Status.FAIL: 0},
    "sitemap_xml": {Status.PASS: 5, Status.WARNING: 0, Status.FAIL: 0},
}


def compute_score(report: Report) -> int:
    """
    Earned points over attainable points, scaled to 0-100.
    Checks missing from the report count toward neither side.
    """
    earned = 0
    maximum = 0
    for name in CHECK_NAMES:
        verdict = getattr(report, name)
        if verdict is None:
            continue
        table = POINTS[name]
        earned += table[verdict.status]
        maximum += table[Status.PASS]

    if maximum == 0:
        return 0
    # Round half up.
    return int(100 * earned / maximum + 0.5)

import unittest

import checks
from models import FetchFailure, FetchSuccess
from schemas import Status


class PageLoadCheckTests(unittest.TestCase):
    def test_fast_ok_page_passes(self) -> None:
        verdict, recommendation = checks.check_page_load(FetchSuccess("<html>", 200, 500), "https://example.com")
        self.assertEqual(verdict.status, Status.PASS)
        self.assertEqual(verdict.details, "Fetched in 500ms (HTTP Status: 200)")
        self.assertIsNone(recommendation)

    def test_thresholds(self) -> None:
        cases = [(999, Status.PASS), (1000, Status.WARNING), (2999, Status.WARNING), (3000, Status.FAIL)]
        for elapsed, expected in cases:
            verdict, _ = checks.check_page_load(FetchSuccess("", 200, elapsed), "https://example.com")
            self.assertEqual(verdict.status, expected, elapsed)

    def test_slow_page_recommendation_mentions_elapsed(self) -> None:
        _, recommendation = checks.check_page_load(FetchSuccess("", 200, 1500), "https://example.com")
        self.assertIn("1500ms", recommendation)

    def test_non_200_fails_even_when_fast(self) -> None:
        verdict, recommendation = checks.check_page_load(FetchSuccess("", 404, 100), "https://example.com")
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertIn("404", recommendation)

    def test_fetch_failure(self) -> None:
        verdict, recommendation = checks.check_page_load(FetchFailure("refused"), "https://example.com")
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertEqual(verdict.details, "Failed to fetch page: refused")
        self.assertIn("https://example.com", recommendation)


class TitleCheckTests(unittest.TestCase):
    def test_45_characters_passes(self) -> None:
        verdict, recommendation = checks.check_title("t" * 45)
        self.assertEqual(verdict.status, Status.PASS)
        self.assertEqual(verdict.length, 45)
        self.assertIsNone(recommendation)

    def test_bounds_are_inclusive(self) -> None:
        self.assertEqual(checks.check_title("t" * 30)[0].status, Status.PASS)
        self.assertEqual(checks.check_title("t" * 60)[0].status, Status.PASS)
        self.assertEqual(checks.check_title("t" * 29)[0].status, Status.WARNING)
        self.assertEqual(checks.check_title("t" * 61)[0].status, Status.WARNING)

    def test_200_characters_warns_with_bounds(self) -> None:
        verdict, recommendation = checks.check_title("t" * 200)
        self.assertEqual(verdict.status, Status.WARNING)
        self.assertIn("30-60", verdict.details)
        self.assertIn("200", recommendation)
        self.assertIn("30", recommendation)
        self.assertIn("60", recommendation)

    def test_missing_title_fails_with_zero_length(self) -> None:
        verdict, recommendation = checks.check_title("")
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertEqual(verdict.length, 0)
        self.assertEqual(verdict.content, "")
        self.assertEqual(recommendation, "Add a descriptive meta title to your page.")


class DescriptionCheckTests(unittest.TestCase):
    def test_160_characters_passes(self) -> None:
        verdict, recommendation = checks.check_description("d" * 160)
        self.assertEqual(verdict.status, Status.PASS)
        self.assertIsNone(recommendation)

    def test_161_characters_warns_citing_range(self) -> None:
        verdict, recommendation = checks.check_description("d" * 161)
        self.assertEqual(verdict.status, Status.WARNING)
        self.assertIn("120-160", verdict.details)
        self.assertIn("161", recommendation)

    def test_119_characters_warns(self) -> None:
        self.assertEqual(checks.check_description("d" * 119)[0].status, Status.WARNING)

    def test_absent_description_fails_without_content(self) -> None:
        verdict, recommendation = checks.check_description(None)
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertIsNone(verdict.content)
        self.assertEqual(verdict.length, 0)
        self.assertIsNotNone(recommendation)

    def test_empty_description_fails_with_empty_content(self) -> None:
        verdict, _ = checks.check_description("")
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertEqual(verdict.content, "")


class OtherCheckTests(unittest.TestCase):
    def test_viewport(self) -> None:
        verdict, recommendation = checks.check_viewport(True)
        self.assertEqual(verdict.status, Status.PASS)
        self.assertIsNone(recommendation)

        verdict, recommendation = checks.check_viewport(False)
        self.assertEqual(verdict.status, Status.WARNING)
        self.assertIn("viewport", recommendation)

    def test_content_unavailable(self) -> None:
        verdict, recommendation = checks.content_unavailable()
        self.assertEqual(verdict.status, Status.FAIL)
        self.assertEqual(verdict.details, checks.CONTENT_UNAVAILABLE)
        self.assertIsNone(recommendation)

    def test_robots(self) -> None:
        url = "https://example.com/robots.txt"
        self.assertEqual(checks.check_robots(True, url)[0].status, Status.PASS)
        self.assertIsNone(checks.check_robots(True, url)[1])
        self.assertEqual(checks.check_robots(False, url)[0].status, Status.WARNING)
        self.assertIsNotNone(checks.check_robots(False, url)[1])
        self.assertEqual(checks.check_robots(None, None)[0].status, Status.FAIL)

    def test_sitemap_has_no_warning(self) -> None:
        url = "https://example.com/sitemap.xml"
        self.assertEqual(checks.check_sitemap(True, url)[0].status, Status.PASS)
        self.assertEqual(checks.check_sitemap(False, url)[0].status, Status.FAIL)
        self.assertEqual(checks.check_sitemap(None, None)[0].status, Status.FAIL)
        self.assertIn("sitemap", checks.check_sitemap(False, url)[1])


if __name__ == "__main__":
    unittest.main()

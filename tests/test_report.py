"""Tests for entry_requirements.report - dataset summaries."""

from entry_requirements.report import format_summary, summarize_dataset


def _doc():
    return {
        "generatedAt": "2026-01-15T10:00:00+00:00",
        "total": 3,
        "results": [
            {
                "country": "Chile", "cca3": "CHL",
                "extracted": {"visaRequired": False, "visaFreeDays": 90,
                              "eAuthorizationRequired": None, "vaccinesRequired": False},
                "color": "green",
            },
            {
                "country": "Angola", "cca3": "AGO",
                "extracted": {"visaRequired": True, "visaFreeDays": None,
                              "eAuthorizationRequired": None, "vaccinesRequired": True},
                "color": "purple",
            },
            {"country": "Broken", "cca3": "BRK", "error": "HTTP 404"},
        ],
    }


class TestSummarizeDataset:
    def test_counts(self):
        summary = summarize_dataset(_doc())
        assert summary["total"] == 3
        assert summary["by_color"] == {
            "green": 1, "blue": 0, "yellow": 0, "red": 0, "purple": 1, "unknown": 1,
        }
        assert summary["unclassified"] == ["BRK"]

    def test_unknown_facts(self):
        summary = summarize_dataset(_doc())
        assert summary["unknown_facts"] == {
            "visaRequired": 1,
            "visaFreeDays": 2,
            "eAuthorizationRequired": 3,
            "vaccinesRequired": 1,
        }

    def test_empty(self):
        summary = summarize_dataset({})
        assert summary["total"] == 0
        assert summary["unclassified"] == []


class TestFormatSummary:
    def test_contains_legend(self):
        text = format_summary(summarize_dataset(_doc()))
        assert "Total countries:  3" in text
        assert "#a855f7" in text
        assert "Visa required, vaccines required" in text
        assert "Unclassified: BRK" in text

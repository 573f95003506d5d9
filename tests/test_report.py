import pytest

from readability_ages.config import ReadabilityConfig
from readability_ages.models import Metric
from readability_ages.report import (
    build_report,
    format_average,
    format_report,
    format_score,
    format_statistics,
)


def test_build_report_uses_configured_metrics():
    cfg = ReadabilityConfig(metrics=["SMOG", "ARI"])
    report = build_report("Cat sat.", config=cfg, source="cat.txt")

    assert [s.metric for s in report.scores] == [Metric.SMOG, Metric.ARI]
    assert [s.age for s in report.scores] == [9, 0]
    assert report.average_age == pytest.approx(4.5)
    payload = report.as_dict()
    assert payload["source"] == "cat.txt"
    assert payload["statistics"]["words"] == 2
    assert payload["scores"][0]["metric"] == "SMOG"


def test_build_report_explicit_metrics_allow_duplicates():
    report = build_report("Cat sat.", [Metric.SMOG, Metric.SMOG])
    assert len(report.scores) == 2
    assert report.average_age == pytest.approx(9.0)


def test_build_report_without_metrics_has_no_average():
    report = build_report("Cat sat.", [])
    assert report.scores == []
    assert report.average_age is None
    assert format_report(report) == format_statistics(report.statistics)


def test_formatting():
    report = build_report("Cat sat.", [Metric.SMOG])

    assert format_statistics(report.statistics) == [
        "Words: 2",
        "Sentences: 1",
        "Characters: 7",
        "Syllables: 2",
        "Polysyllables: 0",
    ]
    assert (
        format_score(report.scores[0])
        == "Simple Measure of Gobbledygook: 3.13 (about 9 year olds)."
    )
    assert (
        format_average(9.0)
        == "This text should be understood in average by 9.00 year olds."
    )
    assert format_average(None) is None

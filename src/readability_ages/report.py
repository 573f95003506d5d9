from __future__ import annotations

from typing import Iterable, List

from .config import ReadabilityConfig
from .models import Metric, MetricScore, ReadabilityReport, TextStatistics
from .scoring import ReadingSession
from .textstats import compute_statistics


def build_report(
    text: str,
    metrics: Iterable[Metric] | None = None,
    config: ReadabilityConfig | None = None,
    source: str | None = None,
) -> ReadabilityReport:
    """Run counting and scoring for ``text`` with a fresh session."""
    cfg = config or ReadabilityConfig()
    selected = list(metrics) if metrics is not None else cfg.selected_metrics()
    session = ReadingSession(
        rounding=cfg.age_rounding,
        include_unmapped=cfg.include_unmapped_in_average,
    )
    stats = compute_statistics(text)
    scores = [session.record(metric, stats) for metric in selected]
    return ReadabilityReport(
        source=source,
        statistics=stats,
        scores=scores,
        average_age=session.average_age(),
    )


def format_statistics(stats: TextStatistics) -> List[str]:
    return [
        f"Words: {stats.word_count}",
        f"Sentences: {stats.sentence_count}",
        f"Characters: {stats.character_count}",
        f"Syllables: {stats.syllable_count}",
        f"Polysyllables: {stats.polysyllable_count}",
    ]


def format_score(result: MetricScore) -> str:
    return (
        f"{result.metric.full_name}: {result.score:.2f} "
        f"(about {result.age} year olds)."
    )


def format_average(average: float | None) -> str | None:
    """Average line, or None when no metric was computed."""
    if average is None:
        return None
    return f"This text should be understood in average by {average:.2f} year olds."


def format_report(report: ReadabilityReport) -> List[str]:
    """Render a full report as console lines."""
    lines = format_statistics(report.statistics)
    if report.scores:
        lines.append("")
        lines.extend(format_score(result) for result in report.scores)
    average_line = format_average(report.average_age)
    if average_line is not None:
        lines.append(average_line)
    return lines

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class Metric(str, Enum):
    """Readability indices supported by the scorer."""

    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"

    @property
    def full_name(self) -> str:
        return _METRIC_TITLES[self]

    @classmethod
    def parse(cls, name: str) -> "Metric":
        """Return the metric matching ``name`` (case-insensitive)."""
        normalized = name.strip().upper()
        for metric in cls:
            if metric.value == normalized:
                return metric
        raise ValueError(f"Unknown metric '{name}'.")


_METRIC_TITLES = {
    Metric.ARI: "Automated Readability Index",
    Metric.FK: "Flesch–Kincaid readability tests",
    Metric.SMOG: "Simple Measure of Gobbledygook",
    Metric.CL: "Coleman–Liau index",
}


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Aggregate counts extracted from a single text."""

    sentence_count: int
    word_count: int
    character_count: int
    syllable_count: int
    polysyllable_count: int

    def as_dict(self) -> dict[str, int]:
        return {
            "sentences": self.sentence_count,
            "words": self.word_count,
            "characters": self.character_count,
            "syllables": self.syllable_count,
            "polysyllables": self.polysyllable_count,
        }


@dataclass(frozen=True, slots=True)
class MetricScore:
    """Score for one metric plus the reading age it maps to."""

    metric: Metric
    score: float
    age: int


@dataclass(slots=True)
class ReadabilityReport:
    """Everything computed for one analysed text."""

    source: str | None
    statistics: TextStatistics
    scores: List[MetricScore] = field(default_factory=list)
    average_age: float | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "statistics": self.statistics.as_dict(),
            "scores": [
                {"metric": entry.metric.value, "score": entry.score, "age": entry.age}
                for entry in self.scores
            ],
            "average_age": self.average_age,
        }

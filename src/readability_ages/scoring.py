from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List

import numpy as np

from .models import Metric, MetricScore, TextStatistics

logger = logging.getLogger(__name__)

UNMAPPED_AGE = 0
ROUNDING_MODES = ("nearest", "ceiling")
ALL_METRICS = (Metric.ARI, Metric.FK, Metric.SMOG, Metric.CL)

# Rounded score -> reading age. Scores outside 1..14 map to UNMAPPED_AGE.
AGE_BY_SCORE: Dict[int, int] = {
    1: 6,
    2: 7,
    3: 9,
    4: 10,
    5: 11,
    6: 12,
    7: 13,
    8: 14,
    9: 15,
    10: 16,
    11: 17,
    12: 18,
    13: 24,
    14: 25,
}


def _ratio(numerator: int, denominator: int) -> np.float64:
    # float64 division keeps IEEE results (inf/nan) for zero denominators.
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float64(numerator) / np.float64(denominator)


def ari_score(stats: TextStatistics) -> float:
    """Automated Readability Index."""
    chars_per_word = _ratio(stats.character_count, stats.word_count)
    words_per_sentence = _ratio(stats.word_count, stats.sentence_count)
    with np.errstate(invalid="ignore"):
        score = 4.71 * chars_per_word + 0.5 * words_per_sentence - 21.43
    return float(score)


def fk_score(stats: TextStatistics) -> float:
    """Flesch-Kincaid grade level."""
    words_per_sentence = _ratio(stats.word_count, stats.sentence_count)
    syllables_per_word = _ratio(stats.syllable_count, stats.word_count)
    with np.errstate(invalid="ignore"):
        score = 0.39 * words_per_sentence + 11.8 * syllables_per_word - 15.59
    return float(score)


def smog_score(stats: TextStatistics) -> float:
    """Simple Measure of Gobbledygook."""
    with np.errstate(invalid="ignore"):
        scaled = np.float64(stats.polysyllable_count) * _ratio(30, stats.sentence_count)
        score = 1.043 * np.sqrt(scaled) + 3.1291
    return float(score)


def cl_score(stats: TextStatistics) -> float:
    """Coleman-Liau index."""
    letters = _ratio(stats.character_count, stats.word_count) * 100
    sentences = _ratio(stats.sentence_count, stats.word_count) * 100
    with np.errstate(invalid="ignore"):
        score = 0.0588 * letters - 0.296 * sentences - 15.8
    return float(score)


METRIC_FUNCTIONS: Dict[Metric, Callable[[TextStatistics], float]] = {
    Metric.ARI: ari_score,
    Metric.FK: fk_score,
    Metric.SMOG: smog_score,
    Metric.CL: cl_score,
}


def round_score(score: float, rounding: str = "nearest") -> int:
    """Round a finite score to an integer, half away from zero by default."""
    if rounding == "nearest":
        magnitude = abs(score)
        whole = math.floor(magnitude)
        if magnitude - whole >= 0.5:
            whole += 1
        return int(math.copysign(whole, score))
    if rounding == "ceiling":
        return math.ceil(score)
    raise ValueError(
        f"Unknown rounding mode '{rounding}'; expected one of {ROUNDING_MODES}."
    )


def score_to_age(score: float, rounding: str = "nearest") -> int:
    """
    Map a readability score onto an estimated reading age.

    Returns UNMAPPED_AGE (0) when the rounded score has no entry in
    AGE_BY_SCORE, which includes nan and infinite scores. The sentinel is not
    a real age.
    """
    if rounding not in ROUNDING_MODES:
        raise ValueError(
            f"Unknown rounding mode '{rounding}'; expected one of {ROUNDING_MODES}."
        )
    if not math.isfinite(score):
        logger.warning("Score %r is not finite; no reading age assigned.", score)
        return UNMAPPED_AGE
    return AGE_BY_SCORE.get(round_score(score, rounding), UNMAPPED_AGE)


def average_age(ages: Iterable[int], include_unmapped: bool = True) -> float | None:
    """
    Mean of the collected ages, or None when there is nothing to average.

    Sentinel ages are counted unless ``include_unmapped`` is False, which
    pulls the mean down whenever a score fell outside the age table.
    """
    values = [
        age for age in ages if include_unmapped or age != UNMAPPED_AGE
    ]
    if not values:
        return None
    return sum(values) / len(values)


def score_metric(
    metric: Metric, stats: TextStatistics, rounding: str = "nearest"
) -> MetricScore:
    """Compute one metric and its reading age."""
    score = METRIC_FUNCTIONS[metric](stats)
    age = score_to_age(score, rounding)
    logger.debug("%s score %.4f maps to age %d", metric.value, score, age)
    return MetricScore(metric=metric, score=score, age=age)


class ReadingSession:
    """
    Ordered record of the ages computed while analysing one text.

    The caller creates one session per analysis and throws it away afterwards;
    computing the same metric twice records its age twice.
    """

    def __init__(self, rounding: str = "nearest", include_unmapped: bool = True) -> None:
        if rounding not in ROUNDING_MODES:
            raise ValueError(
                f"Unknown rounding mode '{rounding}'; expected one of {ROUNDING_MODES}."
            )
        self.rounding = rounding
        self.include_unmapped = include_unmapped
        self.ages: List[int] = []

    def record(self, metric: Metric, stats: TextStatistics) -> MetricScore:
        """Score ``metric`` for ``stats`` and remember the resulting age."""
        result = score_metric(metric, stats, self.rounding)
        self.ages.append(result.age)
        return result

    def average_age(self) -> float | None:
        return average_age(self.ages, self.include_unmapped)

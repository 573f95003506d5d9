"""
readability_ages package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .models import Metric, MetricScore, ReadabilityReport, TextStatistics
from .report import build_report
from .scoring import (
    ReadingSession,
    ari_score,
    average_age,
    cl_score,
    fk_score,
    score_to_age,
    smog_score,
)
from .textstats import compute_statistics

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Metric",
    "MetricScore",
    "ReadabilityReport",
    "TextStatistics",
    "build_report",
    "ReadingSession",
    "ari_score",
    "fk_score",
    "smog_score",
    "cl_score",
    "score_to_age",
    "average_age",
    "compute_statistics",
]

__version__ = "0.1.0"

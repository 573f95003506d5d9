from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .models import Metric
from .scoring import ALL_METRICS, ROUNDING_MODES


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for readability analysis."""

    metrics: List[str] = field(default_factory=lambda: [m.value for m in ALL_METRICS])
    age_rounding: str = "nearest"
    include_unmapped_in_average: bool = True
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.age_rounding not in ROUNDING_MODES:
            raise ValueError(
                f"age_rounding must be one of {ROUNDING_MODES}, got '{self.age_rounding}'."
            )
        self.metrics = [Metric.parse(str(name)).value for name in self.metrics]

    def selected_metrics(self) -> List[Metric]:
        return [Metric(name) for name in self.metrics]

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    allowed = {f.name for f in fields(ReadabilityConfig)}
    return ReadabilityConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)

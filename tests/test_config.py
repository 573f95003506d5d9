from pathlib import Path

import pytest

from readability_ages.config import (
    ReadabilityConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from readability_ages.models import Metric


def test_defaults():
    cfg = load_config()
    assert cfg.metrics == ["ARI", "FK", "SMOG", "CL"]
    assert cfg.selected_metrics() == [Metric.ARI, Metric.FK, Metric.SMOG, Metric.CL]
    assert cfg.age_rounding == "nearest"
    assert cfg.include_unmapped_in_average is True


def test_config_from_yaml_overrides_and_ignores_unknown_keys(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "metrics: [smog, cl]\n"
        "age_rounding: ceiling\n"
        "include_unmapped_in_average: false\n"
        "unused_key: 3\n",
        encoding="utf-8",
    )
    cfg = config_from_yaml(path)

    assert cfg.metrics == ["SMOG", "CL"]
    assert cfg.age_rounding == "ceiling"
    assert cfg.include_unmapped_in_average is False
    assert "unused_key" not in cfg.to_dict()


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == ReadabilityConfig()


def test_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- ARI\n- FK\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)


def test_invalid_values_are_rejected():
    with pytest.raises(ValueError):
        config_from_dict({"age_rounding": "floor"})
    with pytest.raises(ValueError):
        config_from_dict({"metrics": ["ARI", "FOG"]})

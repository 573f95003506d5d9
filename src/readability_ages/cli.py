from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import List

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .models import Metric
from .report import (
    build_report,
    format_average,
    format_report,
    format_score,
    format_statistics,
)
from .scoring import ALL_METRICS, ReadingSession
from .textio import TextSourceError, read_text
from .textstats import compute_statistics

app = typer.Typer(help="Readability ages CLI.", no_args_is_help=True)

logger = logging.getLogger(__name__)


class MetricChoice(str, Enum):
    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"
    ALL = "all"


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Compute readability scores and reading ages for text files."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Argument(..., help="Text file to analyse."),
    metric: List[MetricChoice] | None = typer.Option(
        None,
        "--metric",
        "-m",
        case_sensitive=False,
        help="Metric to compute; repeat for several. Defaults to the configured list.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    json_output: bool = typer.Option(
        False, "--json", help="Emit the report as JSON instead of text."
    ),
) -> None:
    """Analyse one file and print its counts, scores and average age."""
    cfg = load_config(config)
    metrics = _expand_metrics(metric) if metric else cfg.selected_metrics()
    text = _read_or_exit(input_path, cfg)
    report = build_report(text, metrics, cfg, source=str(input_path))
    if json_output:
        typer.echo(json.dumps(report.as_dict(), indent=2))
        return
    for line in format_report(report):
        typer.echo(line)


@app.command()
def interactive(
    input_path: Path | None = typer.Argument(
        None, help="Analyse this file once instead of prompting for file names."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Prompt for files and metrics until the user quits."""
    cfg = load_config(config)
    file_name: str | None = None

    while True:
        if input_path is None:
            typer.echo()
            file_name = typer.prompt(
                'Enter the file name to analyse, or "quit"', default=file_name
            )
            if file_name.strip().lower() == "quit":
                break
        else:
            file_name = str(input_path)

        try:
            text = read_text(file_name, cfg.encoding)
        except TextSourceError as exc:
            typer.echo(str(exc), err=True)
            if input_path is not None:
                raise typer.Exit(code=1) from exc
        else:
            _run_session(text, cfg)

        if input_path is not None:
            break


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _run_session(text: str, config: ReadabilityConfig) -> None:
    """Show counts, then score metrics picked from the menu until all/quit."""
    stats = compute_statistics(text)
    for line in format_statistics(stats):
        typer.echo(line)

    session = ReadingSession(
        rounding=config.age_rounding,
        include_unmapped=config.include_unmapped_in_average,
    )
    while True:
        typer.echo()
        for metric in ALL_METRICS:
            typer.echo(f"{metric.value} - {metric.full_name}")
        typer.echo("all - All of the above")
        typer.echo("quit - Quit")
        choice = typer.prompt(
            "Enter the score you want to calculate", default="all"
        ).strip()
        typer.echo()

        if choice.lower() == "quit":
            break
        if choice.lower() == "all":
            for metric in ALL_METRICS:
                typer.echo(format_score(session.record(metric, stats)))
            break
        try:
            selected = Metric.parse(choice)
        except ValueError:
            typer.echo("Bad input")
            continue
        typer.echo(format_score(session.record(selected, stats)))

    average_line = format_average(session.average_age())
    if average_line is not None:
        typer.echo(average_line)


def _expand_metrics(choices: List[MetricChoice]) -> List[Metric]:
    """Turn CLI choices into metrics in the given order, expanding 'all'."""
    metrics: List[Metric] = []
    for choice in choices:
        if choice is MetricChoice.ALL:
            metrics.extend(ALL_METRICS)
        else:
            metrics.append(Metric(choice.value))
    return metrics


def _read_or_exit(path: Path, config: ReadabilityConfig) -> str:
    try:
        return read_text(path, config.encoding)
    except TextSourceError as exc:
        logger.debug("Failed to read %s", path, exc_info=True)
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()

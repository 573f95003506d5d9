"""
Tiny helper script to eyeball scores and reading ages for a couple of samples.
"""

from __future__ import annotations

from readability_ages import Metric, ReadabilityConfig, build_report
from readability_ages.report import format_report


def main() -> None:
    config = ReadabilityConfig(include_unmapped_in_average=False)
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    for sample in samples:
        report = build_report(sample, list(Metric), config)
        print("-" * 40)
        print(sample)
        for line in format_report(report):
            print(line)


if __name__ == "__main__":
    main()

from __future__ import annotations

from pathlib import Path


class TextSourceError(RuntimeError):
    """Raised when an input file cannot be turned into text."""


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the file's lines joined by single spaces."""
    file_path = Path(path)
    if not file_path.is_file():
        raise TextSourceError(f'Could not find filename "{path}"')
    try:
        with file_path.open("r", encoding=encoding) as fh:
            lines = [line.rstrip("\n") for line in fh]
    except (OSError, UnicodeDecodeError) as exc:
        raise TextSourceError(f'Could not read filename "{path}"') from exc
    return " ".join(lines)

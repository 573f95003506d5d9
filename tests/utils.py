from __future__ import annotations

from pathlib import Path


def write_text_file(path: Path, lines: list[str], newline: str = "\n") -> Path:
    """Write ``lines`` to ``path`` with a trailing newline, like a typical text file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
    return path

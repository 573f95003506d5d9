from pathlib import Path

import pytest

from readability_ages.textio import TextSourceError, read_text
from tests.utils import write_text_file


def test_read_text_joins_lines_with_spaces(tmp_path: Path):
    path = write_text_file(tmp_path / "doc.txt", ["Line one.", "Line two."])
    assert read_text(path) == "Line one. Line two."


def test_read_text_handles_windows_newlines(tmp_path: Path):
    path = write_text_file(
        tmp_path / "doc.txt", ["First line", "second line."], newline="\r\n"
    )
    assert read_text(path) == "First line second line."


def test_read_text_keeps_blank_lines_as_extra_spaces(tmp_path: Path):
    path = write_text_file(tmp_path / "doc.txt", ["One.", "", "Two."])
    assert read_text(path) == "One.  Two."


def test_read_text_missing_file(tmp_path: Path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(TextSourceError, match="Could not find filename"):
        read_text(missing)


def test_read_text_undecodable_file(tmp_path: Path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa\x00")
    with pytest.raises(TextSourceError, match="Could not read filename"):
        read_text(path)

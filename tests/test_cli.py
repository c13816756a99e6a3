"""Tests for the chordshift command-line interface."""

from pathlib import Path

from click.testing import CliRunner

from chordshift import __version__
from chordshift.cli import main

SHEET = "G    D    Em   C\nI found a love for me\n"


def test_version_option() -> None:
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_transpose_stdin_to_stdout() -> None:
    result = CliRunner().invoke(main, ["transpose", "-n", "2"], input=SHEET)
    assert result.exit_code == 0
    assert result.output == "A    E    F#m   D\nI found a love for me"


def test_transpose_negative_half_steps() -> None:
    result = CliRunner().invoke(main, ["transpose", "--half-steps", "-1"], input="C Am")
    assert result.exit_code == 0
    assert result.output == "B G#m"


def test_transpose_file_to_file(tmp_path: Path) -> None:
    source = tmp_path / "song.txt"
    source.write_text(SHEET, encoding="utf-8")
    target = tmp_path / "out.txt"

    result = CliRunner().invoke(main, ["transpose", str(source), "-n", "5", "-o", str(target)])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "C    G    Am   F\nI found a love for me"
    assert "1 of 2 line(s) transposed" in result.output


def test_transpose_unwritable_output_fails(tmp_path: Path) -> None:
    target = tmp_path / "missing" / "out.txt"
    result = CliRunner().invoke(main, ["transpose", "-o", str(target)], input=SHEET)
    assert result.exit_code == 1


def test_transpose_rejects_non_finite_slope() -> None:
    result = CliRunner().invoke(main, ["transpose", "--slope", "nan"], input=SHEET)
    assert result.exit_code == 2


def test_transpose_verbose_still_writes_text() -> None:
    result = CliRunner().invoke(main, ["transpose", "-v", "-n", "0"], input="Bb")
    assert result.exit_code == 0
    assert result.output.endswith("A#")


def test_inspect_reports_each_line() -> None:
    result = CliRunner().invoke(main, ["inspect"], input=SHEET)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert "CHORDS" in lines[0]
    assert "TEXT" in lines[1]
    assert lines[1].endswith("I found a love for me")


def test_inspect_honours_slope() -> None:
    result = CliRunner().invoke(main, ["inspect", "--slope", "5"], input="Verse: G C")
    assert result.exit_code == 0
    assert "TEXT" in result.output

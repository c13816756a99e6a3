"""chordshift CLI entry point."""

import logging
import sys
from typing import Any, Callable, TextIO

import click

from chordshift import __version__
from chordshift.chord_line import ChordLineClassifier
from chordshift.document import DocumentTransposer

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _build_transposer(slope: float, bias: float) -> DocumentTransposer:
    """Return a DocumentTransposer using the given chord-line thresholds."""
    try:
        classifier = ChordLineClassifier(slope=slope, bias=bias)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return DocumentTransposer(classifier=classifier)


def _classifier_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared --slope/--bias options to a subcommand."""
    func = click.option(
        "--bias",
        type=float,
        default=ChordLineClassifier.DEFAULT_BIAS,
        show_default=True,
        help="Constant offset in favour of a line being a chord line.",
    )(func)
    func = click.option(
        "--slope",
        type=float,
        default=ChordLineClassifier.DEFAULT_SLOPE,
        show_default=True,
        help=(
            "Penalty per non-chord word on a line. "
            "Raise it if lyric lines are being transposed."
        ),
    )(func)
    return func


# ── CLI group ──────────────────────────────────────────────────────────────────

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="chordshift")
def main() -> None:
    """chordshift: transpose the chords in plain-text song sheets."""


# ── transpose subcommand ───────────────────────────────────────────────────────

@main.command()
@click.argument("input_file", metavar="INPUT", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--half-steps",
    "-n",
    type=int,
    default=0,
    show_default=True,
    help=(
        "Semitones to shift by, negative to go down. "
        "0 still rewrites flat roots with sharps (Bb -> A#)."
    ),
)
@click.option(
    "--output",
    "-o",
    default=None,
    metavar="PATH",
    help="Destination text file. Defaults to standard output.",
)
@_classifier_options
@click.option("--verbose", "-v", is_flag=True, help="Log how each line was classified.")
def transpose(
    input_file: TextIO,
    half_steps: int,
    output: str | None,
    slope: float,
    bias: float,
    verbose: bool,
) -> None:
    """
    Transpose the chord lines of a song sheet.

    INPUT is a text file with chord lines above lyric lines, or - for stdin.
    Lyric lines are copied unchanged.

    \b
    Examples:
      chordshift transpose song.txt -n 2
      chordshift transpose song.txt -n -3 -o song_in_a.txt
      cat song.txt | chordshift transpose - --half-steps 5
    """
    _configure_logging(verbose)
    transposer = _build_transposer(slope, bias)

    result = transposer.transpose(input_file.read(), half_steps)

    if output is None:
        click.echo(result.text, nl=False)
        return

    click.echo(f"chordshift v{__version__}")
    click.echo(f"  Input      : {input_file.name}")
    click.echo(f"  Half-steps : {half_steps}")
    click.echo(f"  Output     : {output}")
    click.echo()

    try:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(result.text)
    except OSError as exc:
        click.echo(f"  ERROR: Could not write output file: {exc}", err=True)
        sys.exit(1)

    click.echo(
        f"Done!  {result.chord_lines} of {result.total_lines} line(s) "
        f"transposed → '{output}'."
    )


# ── inspect subcommand ─────────────────────────────────────────────────────────

@main.command()
@click.argument("input_file", metavar="INPUT", type=click.File("r", encoding="utf-8"), default="-")
@_classifier_options
def inspect(input_file: TextIO, slope: float, bias: float) -> None:
    """
    Show how each line of a song sheet is classified.

    For every line prints its number, the chord and non-chord word counts,
    and CHORDS or TEXT. Only CHORDS lines are changed by transpose.

    \b
    Examples:
      chordshift inspect song.txt
      chordshift inspect song.txt --slope 1.0
    """
    transposer = _build_transposer(slope, bias)

    for report in transposer.analyze(input_file.read()):
        verdict = "CHORDS" if report.is_chord_line else "TEXT"
        click.echo(
            f"{report.number:4d}  {report.chord_count:3d} {report.non_chord_count:3d}  "
            f"{verdict:<6}  {report.text}"
        )

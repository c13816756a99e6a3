"""DocumentTransposer: transposes the chord lines of a whole song sheet."""

import logging
from dataclasses import dataclass

from chordshift.chord_line import ChordLineClassifier
from chordshift.line_tokenizer import tokenize_line

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


@dataclass(frozen=True)
class LineReport:
    """Classification details for one line, as shown by ``chordshift inspect``."""

    number: int
    chord_count: int
    non_chord_count: int
    is_chord_line: bool
    text: str


@dataclass(frozen=True)
class TransposeResult:
    """
    Output of a document transposition.

    Attributes:
        text:        The transposed document.
        chord_lines: How many lines were judged chord lines and transposed.
        total_lines: How many lines the input was split into.
    """

    text: str
    chord_lines: int
    total_lines: int


def split_lines(text: str) -> list[str]:
    """
    Split a document into physical lines on "\\n".

    A single trailing line break does not start another line, so it is not
    reproduced when the lines are joined back together. Carriage returns
    are left in place and end up in whitespace runs.
    """
    if not text:
        return []
    lines = text.split(LINE_SEPARATOR)
    if text.endswith(LINE_SEPARATOR):
        lines.pop()
    return lines


class DocumentTransposer:
    """
    Runs the tokenize -> classify -> transpose -> render pipeline per line.

    Holds no per-call state, so one instance may be shared freely:

        transposer = DocumentTransposer()
        transposer.transpose("C G Am F", 2).text  # "D A Bm G"
    """

    def __init__(self, classifier: ChordLineClassifier | None = None) -> None:
        self.classifier = classifier if classifier is not None else ChordLineClassifier()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def transpose(self, text: str, half_steps: int) -> TransposeResult:
        """
        Transpose every chord on every chord line of *text*.

        Lines that are not chord lines are copied verbatim, even when they
        contain tokens that parse as chords.

        Args:
            text:       Song sheet mixing chord lines and lyric lines.
            half_steps: Signed semitone offset, any integer.

        Returns:
            TransposeResult with the rendered text and line counts.
        """
        rendered: list[str] = []
        chord_lines = 0

        for number, raw in enumerate(split_lines(text), start=1):
            line = tokenize_line(raw)
            is_chord_line = self.classifier.classify(line)
            logger.debug(
                "Line %d: %d chord(s), %d non-chord(s), chord line=%s",
                number, line.chord_count, line.non_chord_count, is_chord_line,
            )
            if is_chord_line:
                chord_lines += 1
                for chord in line.chords():
                    chord.transpose(half_steps)
            rendered.append(line.render())

        return TransposeResult(
            text=LINE_SEPARATOR.join(rendered),
            chord_lines=chord_lines,
            total_lines=len(rendered),
        )

    def analyze(self, text: str) -> list[LineReport]:
        """Return the classification of every line of *text* without transposing."""
        reports: list[LineReport] = []
        for number, raw in enumerate(split_lines(text), start=1):
            line = tokenize_line(raw)
            reports.append(
                LineReport(
                    number=number,
                    chord_count=line.chord_count,
                    non_chord_count=line.non_chord_count,
                    is_chord_line=self.classifier.classify(line),
                    text=raw,
                )
            )
        return reports


_DEFAULT_TRANSPOSER = DocumentTransposer()


def transpose(text: str, half_steps: int) -> str:
    """Transpose the chord lines of *text* by *half_steps* and return the new text."""
    return _DEFAULT_TRANSPOSER.transpose(text, half_steps).text

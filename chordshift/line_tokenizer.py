"""Line tokenizer: splits a physical line into classified whitespace/non-whitespace runs."""

from chordshift.text_models import Line
from chordshift.token_classifier import classify_run


def split_runs(text: str) -> list[str]:
    """
    Split *text* at every whitespace/non-whitespace boundary.

    Joining the result gives back *text* unchanged. An empty string has no
    runs.
    """
    if not text:
        return []

    runs: list[str] = []
    start = 0
    start_is_space = text[0].isspace()

    for i, ch in enumerate(text[1:], start=1):
        if ch.isspace() == start_is_space:
            continue  # extend the current run

        runs.append(text[start:i])
        start = i
        start_is_space = ch.isspace()

    runs.append(text[start:])
    return runs


def tokenize_line(text: str) -> Line:
    """Build a Line from one physical line of text (no line breaks)."""
    line = Line()
    for run in split_runs(text):
        line.append(classify_run(run))
    return line

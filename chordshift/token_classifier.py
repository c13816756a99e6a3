"""Token classifier: decides whether a single run is a chord, a word, or whitespace."""

from chordshift.note_catalog import NOTES_FLATS, NOTES_SHARPS, is_recognized_modifier
from chordshift.text_models import Chord, NonChord, Space, Token


def match_note_prefix(run: str) -> str:
    """
    Return the longest note name that prefixes *run*, or "" if none does.

    Flats are scanned before sharps and a later candidate only replaces the
    current one when strictly longer, so the flat spelling wins a tie.
    """
    best = ""
    for name in NOTES_FLATS:
        if run.startswith(name) and len(name) > len(best):
            best = name
    for name in NOTES_SHARPS:
        if run.startswith(name) and len(name) > len(best):
            best = name
    return best


def classify_run(run: str) -> Token:
    """
    Classify one whitespace-homogeneous run of a line.

    The whitespace-ness of the first character decides for the whole run;
    callers are responsible for splitting runs at whitespace boundaries.

    A run is a Chord when it is a note name optionally followed by exactly
    one recognized modifier ("Am", "Cmaj7"). Anything after the note name
    that is not a recognized modifier turns the whole run into a NonChord
    ("Cmaj78", "Cool").

    Raises:
        ValueError: If *run* is empty.
    """
    if not run:
        raise ValueError("Cannot classify an empty run.")

    if run[0].isspace():
        return Space(run)

    base = match_note_prefix(run)
    if not base:
        return NonChord(run)

    modifier = run[len(base):]
    if not modifier:
        return Chord(base)
    if is_recognized_modifier(modifier):
        return Chord(base, modifier)
    return NonChord(run)

"""Note catalog: chromatic pitch tables and recognized chord-quality suffixes."""

from typing import Final

# Chromatic pitch class names (index 0 = C), index-aligned between spellings
NOTES_SHARPS: Final[tuple[str, ...]] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
NOTES_FLATS: Final[tuple[str, ...]] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)

SEMITONES_PER_OCTAVE: Final[int] = 12

#: Chord-quality suffixes accepted after a note name (exact, case-sensitive).
MODIFIERS: Final[frozenset[str]] = frozenset(
    {
        "m", "7", "maj7", "m7", "sus2", "sus4", "dim", "aug", "5", "add9",
        "9", "6", "11", "13", "7sus4", "dim7", "m6", "m9", "maj9", "m11",
        "m13", "maj13", "add11", "7b9",
    }
)


def _check_index(index: int) -> None:
    # Negative indices would otherwise wrap around the table
    if not 0 <= index < SEMITONES_PER_OCTAVE:
        raise IndexError(f"Pitch class index {index} is outside 0..11.")


def sharp_name(index: int) -> str:
    """Return the sharp spelling of pitch class *index* (0=C, ..., 11=B)."""
    _check_index(index)
    return NOTES_SHARPS[index]


def flat_name(index: int) -> str:
    """Return the flat spelling of pitch class *index* (0=C, ..., 11=B)."""
    _check_index(index)
    return NOTES_FLATS[index]


def is_recognized_modifier(candidate: str) -> bool:
    return candidate in MODIFIERS

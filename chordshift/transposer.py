"""Transposer: shifts chord roots by half-steps and re-spells them with sharps."""

from chordshift.note_catalog import NOTES_FLATS, NOTES_SHARPS, SEMITONES_PER_OCTAVE


def pitch_index(base: str) -> int:
    """
    Return the pitch class (0-11) of a root spelling.

    The flat table is searched first, then the sharp table; natural names
    appear in both and resolve to the same index either way.

    Raises:
        ValueError: If *base* is not spelled in either table.
    """
    if base in NOTES_FLATS:
        return NOTES_FLATS.index(base)
    if base in NOTES_SHARPS:
        return NOTES_SHARPS.index(base)
    raise ValueError(f"Unknown chord base {base!r}.")


def transpose_base(base: str, half_steps: int) -> str:
    """
    Shift *base* by *half_steps* semitones and return its sharp spelling.

    The result is always taken from the sharp table, so a flat-spelled base
    comes back sharp-spelled even when *half_steps* is 0 ("Db" -> "C#").
    Python's ``%`` keeps the new index in 0..11 for negative shifts.

    Args:
        base:       Root spelling from either note table, e.g. "Bb".
        half_steps: Signed semitone offset, any integer.

    Returns:
        The transposed root, e.g. ``transpose_base("C", -1) == "B"``.
    """
    new_index = (pitch_index(base) + half_steps) % SEMITONES_PER_OCTAVE
    return NOTES_SHARPS[new_index]

"""chordshift: transpose the chords in plain-text song sheets."""

from chordshift.document import transpose

__version__ = "0.1.0"

__all__ = ["__version__", "transpose"]

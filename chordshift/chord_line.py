"""ChordLineClassifier: decides whether a line holds chords or lyrics."""

import math

from chordshift.text_models import Line


class ChordLineClassifier:
    """
    Heuristic that tells chord lines apart from lyric or prose lines.

    Decision rule
    -------------
    Given a line's chord and non-chord tallies (whitespace runs are ignored):

    1. **Blank line** – no chords and no words: not a chord line.

    2. **Chords only** – at least one chord and no other words: chord line.

    3. **Mixed** – the linear discriminant decides:

           chords - slope * non_chords + bias > 0

       With the default slope (0.8) and bias (0.7) a line may carry a few
       stray words, such as a "Chorus:" label, and still count as chords,
       while a line of lyrics that happens to contain "A" or "Am" does not.
    """

    DEFAULT_SLOPE = 0.8
    DEFAULT_BIAS = 0.7

    def __init__(self, slope: float = DEFAULT_SLOPE, bias: float = DEFAULT_BIAS) -> None:
        """
        Args:
            slope: Weight of each non-chord word against the line.
                   Increase to make lines with lyrics less likely to transpose.
            bias:  Constant offset in favour of the line being chords.

        Raises:
            ValueError: If either value is not a finite number.
        """
        if not math.isfinite(slope):
            raise ValueError("slope must be a finite number")
        if not math.isfinite(bias):
            raise ValueError("bias must be a finite number")
        self.slope = slope
        self.bias = bias

    def score(self, chord_count: int, non_chord_count: int) -> float:
        """Return the discriminant value; positive means chord line."""
        return chord_count - self.slope * non_chord_count + self.bias

    def is_chord_line(self, chord_count: int, non_chord_count: int) -> bool:
        if chord_count == 0 and non_chord_count == 0:
            return False
        if non_chord_count == 0:
            return True
        return self.score(chord_count, non_chord_count) > 0

    def classify(self, line: Line) -> bool:
        """Apply :meth:`is_chord_line` to a tokenized line's tallies."""
        return self.is_chord_line(line.chord_count, line.non_chord_count)

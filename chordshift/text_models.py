"""Data models for tokenized song-sheet lines."""

from dataclasses import dataclass, field

from chordshift.transposer import transpose_base


@dataclass
class Chord:
    """
    A chord symbol recognized in the text.

    Attributes:
        base:     Root spelling as matched or last rendered, e.g. "Bb" or "C#".
        modifier: Chord-quality suffix such as "m" or "maj7", or None.
    """

    base: str
    modifier: str | None = None

    def transpose(self, half_steps: int) -> None:
        """Shift the base in place, re-spelling it with sharps."""
        self.base = transpose_base(self.base, half_steps)

    def render(self) -> str:
        return f"{self.base}{self.modifier or ''}"


@dataclass(frozen=True)
class NonChord:
    """A non-whitespace run that did not parse as a chord, kept verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class Space:
    """A whitespace run, kept verbatim (tabs, repeated spaces, stray CR)."""

    text: str

    def render(self) -> str:
        return self.text


Token = Chord | NonChord | Space


@dataclass
class Line:
    """
    One physical line split into runs.

    Attributes:
        tokens:          Runs in their original order.
        chord_count:     Number of Chord tokens.
        non_chord_count: Number of NonChord tokens. Space tokens are not counted.
    """

    tokens: list[Token] = field(default_factory=list)
    chord_count: int = 0
    non_chord_count: int = 0

    def append(self, token: Token) -> None:
        """Add a token and update the tallies."""
        match token:
            case Chord():
                self.chord_count += 1
            case NonChord():
                self.non_chord_count += 1
            case Space():
                pass
        self.tokens.append(token)

    def chords(self) -> list[Chord]:
        return [token for token in self.tokens if isinstance(token, Chord)]

    def render(self) -> str:
        parts: list[str] = []
        for token in self.tokens:
            match token:
                case Chord():
                    parts.append(token.render())
                case NonChord(text=text) | Space(text=text):
                    parts.append(text)
        return "".join(parts)

"""Unit tests for whole-document transposition."""

from chordshift import transpose
from chordshift.chord_line import ChordLineClassifier
from chordshift.document import DocumentTransposer, split_lines

SONG = (
    "Intro: C  G  Am  F\n"
    "\n"
    "C              G\n"
    "Hey Jude, don't make it bad\n"
    "Am           F\n"
    "Take a sad song and make it better"
)


def test_chord_line_shifted_lyric_line_untouched() -> None:
    result = transpose("C G Am F\nHey Jude, don't make me cry", 2)
    assert result == "D A Bm G\nHey Jude, don't make me cry"


def test_empty_input_gives_empty_output() -> None:
    assert transpose("", 5) == ""


def test_zero_shift_normalizes_flats() -> None:
    assert transpose("Bb  Eb  F7", 0) == "A#  D#  F7"


def test_whitespace_between_chords_is_kept_verbatim() -> None:
    text = "C" + " " * 14 + "G\tF"
    assert transpose(text, 1) == "C#" + " " * 14 + "G#\tF#"


def test_lyric_line_with_chord_like_words_is_not_transposed() -> None:
    text = "A long time ago in a galaxy"
    assert transpose(text, 3) == text


def test_non_chord_tokens_on_chord_line_are_kept() -> None:
    assert transpose("Chorus: G Cmaj78 D", 2) == "Chorus: A Cmaj78 E"


def test_blank_lines_are_kept() -> None:
    assert transpose("C\n\n   \nG", 2) == "D\n\n   \nA"


def test_trailing_line_break_is_dropped() -> None:
    assert transpose("C G\n", 2) == "D A"


def test_carriage_return_is_kept_in_place() -> None:
    assert transpose("C G\r\nla la la la\r\n", 2) == "D A\r\nla la la la\r"


def test_split_lines() -> None:
    assert split_lines("") == []
    assert split_lines("\n") == [""]
    assert split_lines("a\nb") == ["a", "b"]
    assert split_lines("a\nb\n") == ["a", "b"]
    assert split_lines("a\n\n") == ["a", ""]


def test_transpose_result_counts_chord_lines() -> None:
    result = DocumentTransposer().transpose(SONG, -2)
    assert result.chord_lines == 3
    assert result.total_lines == 6
    assert result.text.splitlines()[0] == "Intro: A#  F  Gm  D#"


def test_custom_classifier_is_used() -> None:
    strict = DocumentTransposer(ChordLineClassifier(slope=10.0))
    assert strict.transpose("Intro: C G", 2).text == "Intro: C G"


def test_analyze_reports_every_line() -> None:
    reports = DocumentTransposer().analyze(SONG)
    assert [r.number for r in reports] == [1, 2, 3, 4, 5, 6]
    assert [r.is_chord_line for r in reports] == [True, False, True, False, True, False]
    assert reports[0].chord_count == 4
    assert reports[0].non_chord_count == 1
    assert reports[3].text == "Hey Jude, don't make it bad"


def test_extreme_half_steps() -> None:
    assert transpose("C", 12 * 1000 + 1) == "C#"
    assert transpose("C", -12 * 1000 - 1) == "B"

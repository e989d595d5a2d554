import logging

import pytest

import minstrel.constants
import minstrel.note


def test_parse_with_octave ():

	"""Test names followed by an octave number."""

	assert minstrel.note.parse("C0") == minstrel.note.Note(0)
	assert minstrel.note.parse("Db3") == minstrel.note.Note(37)
	assert minstrel.note.parse("Bb10") == minstrel.note.Note(130)
	assert minstrel.note.parse("B4") == minstrel.note.Note(59)


def test_parse_without_octave_defaults_to_zero ():

	"""Test a bare name lands in octave 0."""

	assert minstrel.note.parse("Ab") == minstrel.note.Note(8)
	assert minstrel.note.parse("C") == minstrel.note.Note(0)
	assert minstrel.note.parse("B") == minstrel.note.Note(11)


def test_flat_names_take_precedence ():

	"""Test flats are not split into a natural plus a stray 'b'."""

	assert minstrel.note.parse("Db").value == 1
	assert minstrel.note.parse("D").value == 2
	assert minstrel.note.parse("Eb2").value == 27
	assert minstrel.note.parse("Gb0").value == 6
	assert minstrel.note.parse("Bb1").value == 22


def test_every_name_parses_to_its_pitch_class ():

	"""Test the full name table."""

	names = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

	for pitch_class, name in enumerate(names):
		assert minstrel.note.parse(f"{name}5").value == pitch_class + 60


def test_parse_leading_zeros ():

	"""Test octave digits are read as a decimal integer."""

	assert minstrel.note.parse("E06") == minstrel.note.Note(76)


def test_classmethod_parse ():

	"""Test Note.parse delegates to the module parser."""

	assert minstrel.note.Note.parse("Db3") == minstrel.note.Note(37)


@pytest.mark.parametrize("text", ["Cb2", "C#4", "H2", "c4", "Bbb", "", " C4", "#4", "4"])
def test_invalid_names (text: str):

	"""Test unrecognised names raise InvalidNameError."""

	with pytest.raises(minstrel.note.InvalidNameError) as info:
		minstrel.note.parse(text)

	assert info.value.text == text


@pytest.mark.parametrize("text", ["Gb-2", "C+3", "D 4", "E4.0", "F4 ", "Ax", "A4b"])
def test_invalid_octaves (text: str):

	"""Test a non-numeric octave raises InvalidOctaveError."""

	with pytest.raises(minstrel.note.InvalidOctaveError, match="octave"):
		minstrel.note.parse(text)


def test_parse_errors_are_value_errors ():

	"""Test callers can catch parse failures as ValueError."""

	with pytest.raises(ValueError):
		minstrel.note.parse("Cb2")

	with pytest.raises(minstrel.note.NoteParseError):
		minstrel.note.parse("Gb-2")


def test_parse_huge_octave_overflows ():

	"""Test an octave beyond the representable range is rejected."""

	with pytest.raises(minstrel.note.NoteOverflowError):
		minstrel.note.parse("C" + "9" * 30)

	# Longer than the interpreter will convert with int().
	with pytest.raises(minstrel.note.NoteOverflowError, match="too large"):
		minstrel.note.parse("C" + "9" * 5000)


def test_parse_leading_zeros_do_not_overflow ():

	"""Test padding zeros are ignored when sizing the octave."""

	assert minstrel.note.parse("D" + "0" * 5000 + "3") == minstrel.note.Note(38)


def test_parse_logs_debug (caplog) -> None:

	"""Test successful parses are logged at debug level."""

	with caplog.at_level(logging.DEBUG, logger="minstrel.note"):
		minstrel.note.parse("Db3")

	assert "note value 37" in caplog.text


def test_render_name_only ():

	"""Test the name-only rendering drops the octave."""

	assert minstrel.note.Note(0).name() == "C"
	assert minstrel.note.Note(37).name() == "Db"
	assert minstrel.note.Note(76).name() == "E"
	assert minstrel.note.format_note(minstrel.note.Note(0), include_octave=False) == "C"
	assert str(minstrel.note.Note(37)) == "Db"


def test_render_with_octave ():

	"""Test the octave-inclusive rendering."""

	assert minstrel.note.Note(0).name_with_octave() == "C0"
	assert minstrel.note.Note(76).name_with_octave() == "E6"
	assert minstrel.note.format_note(minstrel.note.Note(37), include_octave=True) == "Db3"
	assert minstrel.note.Note(130).format(include_octave=True) == "Bb10"


def test_render_never_uses_sharps ():

	"""Test black keys are always spelled as flats."""

	names = [minstrel.note.Note(value).name() for value in range(12)]

	assert not any("#" in name for name in names)
	assert names == ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]


def test_round_trip_with_octave ():

	"""Test octave-inclusive rendering parses back to the same note."""

	for value in list(range(0, 300)) + [10 ** 12, minstrel.constants.MAX_NOTE_VALUE]:
		note = minstrel.note.Note(value)
		assert minstrel.note.parse(note.name_with_octave()) == note

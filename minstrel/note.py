"""The `Note` value type.

A `Note` is a single non-negative integer semitone index (its `value`). A value of
0 is C0, 1 is Db0, 12 is C1 and so on: ``value = pitch_class + 12 * octave``.

Notes can be built directly from an integer or parsed from text::

	import minstrel.note

	a0 = minstrel.note.Note(9)
	eb100 = minstrel.note.parse("Eb100")

Transposition and intervals are kept as separate operations. Adding or subtracting
an integer moves the note; subtracting one note from another gives the unsigned
number of semitones between them::

	c1 = minstrel.note.Note(12)
	c1 + 5              # Note(value=17)
	c1 - 2              # Note(value=10)
	c1 - Note(16)       # 4

Enumeration is explicit. ``Note.ascending()`` returns an unbounded iterator that
starts at the note itself and climbs one semitone at a time::

	for note in itertools.islice(minstrel.note.Note(0).ascending(), 12):
		print(note)
"""

import dataclasses
import logging
import re
import typing

import minstrel.constants


logger = logging.getLogger(__name__)


# Leading letter plus any run of accidentals. Matching the whole run means a flat
# name always wins over the natural sharing its first letter ("Db" before "D").
_NAME_PATTERN = re.compile(r"([A-Za-z][b#]*)(.*)", re.DOTALL)
_OCTAVE_PATTERN = re.compile(r"[0-9]+")

# Octaves with more digits than this cannot produce a representable value.
_MAX_OCTAVE_DIGITS = len(str(minstrel.constants.MAX_NOTE_VALUE // minstrel.constants.SEMITONES_PER_OCTAVE))


class NoteParseError (ValueError):

	"""
	Raised when text cannot be parsed as a note.
	"""

	def __init__ (self, text: str, message: str) -> None:

		super().__init__(message)
		self.text = text


class InvalidNameError (NoteParseError):

	"""
	The text does not begin with one of the twelve recognised note names.
	"""


class InvalidOctaveError (NoteParseError):

	"""
	The text after the note name is not a non-negative decimal integer.
	"""


class NoteRangeError (ArithmeticError):

	"""
	Raised when an operation would move a note outside the representable range.
	"""


class NoteUnderflowError (NoteRangeError):
	pass


class NoteOverflowError (NoteRangeError):
	pass


def _check_semitones (semitones: int) -> None:

	"""
	Reject semitone counts that are not non-negative integers.
	"""

	if isinstance(semitones, bool) or not isinstance(semitones, int):
		raise TypeError(f"Semitones must be an int, got {type(semitones).__name__}")

	if semitones < 0:
		raise ValueError("Semitones cannot be negative")


@dataclasses.dataclass(frozen=True, order=True)
class Note:

	"""
	A musical pitch stored as a semitone index from C0.

	Equality, hashing and ordering all use `value` alone.
	"""

	value: int


	def __post_init__ (self) -> None:

		if isinstance(self.value, bool) or not isinstance(self.value, int):
			raise TypeError(f"Note value must be an int, got {type(self.value).__name__}")

		if self.value < 0:
			raise ValueError("Note value cannot be negative")

		if self.value > minstrel.constants.MAX_NOTE_VALUE:
			raise NoteOverflowError(f"Note value {self.value} exceeds {minstrel.constants.MAX_NOTE_VALUE}")


	@classmethod
	def from_pitch_class (cls, pitch_class: int, octave: int = 0) -> "Note":

		"""Build a note from a pitch class (0-11) and an octave.

		Parameters:
			pitch_class: 0 for C, 1 for Db ... 11 for B.
			octave: Non-negative octave number (default 0).

		Raises:
			ValueError: If either argument is out of range.

		Example:
			```python
			Note.from_pitch_class(1, 3)   # → Note(value=37), Db3
			```
		"""

		if not 0 <= pitch_class < minstrel.constants.SEMITONES_PER_OCTAVE:
			raise ValueError(f"Pitch class must be between 0 and 11, got {pitch_class}")

		if octave < 0:
			raise ValueError("Octave cannot be negative")

		return cls(pitch_class + octave * minstrel.constants.SEMITONES_PER_OCTAVE)


	@classmethod
	def parse (cls, text: str) -> "Note":

		"""
		Parse a note from text. See :func:`parse`.
		"""

		return parse(text)


	@property
	def pitch_class (self) -> int:

		"""
		The pitch class (0-11) with octave information removed.
		"""

		return self.value % minstrel.constants.SEMITONES_PER_OCTAVE


	@property
	def octave (self) -> int:

		"""
		The octave band this note falls in.
		"""

		return self.value // minstrel.constants.SEMITONES_PER_OCTAVE


	def class_only (self) -> "Note":

		"""Return the same pitch class in octave 0.

		Example:
			```python
			Note(53).class_only()   # → Note(value=5), F
			Note(68).class_only()   # → Note(value=8), Ab
			```
		"""

		return Note(self.pitch_class)


	def name (self) -> str:

		"""
		Return the note name without its octave (e.g. ``"Db"``).
		"""

		return minstrel.constants.PC_TO_NOTE_NAME[self.pitch_class]


	def name_with_octave (self) -> str:

		"""
		Return the note name followed by its octave (e.g. ``"Db3"``).

		The result always parses back to the same note.
		"""

		return f"{self.name()}{self.octave}"


	def format (self, include_octave: bool = False) -> str:

		"""
		Render the note as text, with or without the octave.
		"""

		if include_octave:
			return self.name_with_octave()

		return self.name()


	def transpose_up (self, semitones: int) -> "Note":

		"""Return a new note the given number of semitones higher.

		Raises:
			ValueError: If ``semitones`` is negative.
			NoteOverflowError: If the result would exceed ``MAX_NOTE_VALUE``.
		"""

		_check_semitones(semitones)

		if semitones > minstrel.constants.MAX_NOTE_VALUE - self.value:
			raise NoteOverflowError(f"Cannot transpose {self.name_with_octave()} up by {semitones} semitones")

		return Note(self.value + semitones)


	def transpose_down (self, semitones: int) -> "Note":

		"""Return a new note the given number of semitones lower.

		Raises:
			ValueError: If ``semitones`` is negative.
			NoteUnderflowError: If ``semitones`` is greater than the note's value.
		"""

		_check_semitones(semitones)

		if semitones > self.value:
			raise NoteUnderflowError(f"Cannot transpose {self.name_with_octave()} down by {semitones} semitones")

		return Note(self.value - semitones)


	def interval_to (self, other: "Note") -> int:

		"""
		Return the unsigned number of semitones between this note and ``other``.
		"""

		return abs(self.value - other.value)


	def ascending (self) -> "NoteIterator":

		"""
		Return an unbounded iterator starting at this note and rising by one semitone.
		"""

		return NoteIterator(self)


	def __add__ (self, semitones: object) -> "Note":

		if isinstance(semitones, bool) or not isinstance(semitones, int):
			return NotImplemented

		return self.transpose_up(semitones)


	def __sub__ (self, other: object) -> typing.Union["Note", int]:

		if isinstance(other, Note):
			return self.interval_to(other)

		if isinstance(other, bool) or not isinstance(other, int):
			return NotImplemented

		return self.transpose_down(other)


	def __str__ (self) -> str:

		return self.name()


class NoteIterator:

	"""
	Ascending chromatic iterator over notes.

	The first item is the origin note unchanged; each later item is one semitone
	above the one before. The iterator never ends on its own, so bound it with
	``itertools.islice`` or similar. It cannot be restarted.
	"""

	def __init__ (self, origin: Note) -> None:

		self._next_value = origin.value


	def __iter__ (self) -> "NoteIterator":

		return self


	def __next__ (self) -> Note:

		if self._next_value > minstrel.constants.MAX_NOTE_VALUE:
			raise NoteOverflowError("Note enumeration passed the largest representable value")

		note = Note(self._next_value)
		self._next_value += 1

		return note


def parse (text: str) -> Note:

	"""Parse a note from its text form.

	The grammar is ``<Name><Octave?>``. ``Name`` is one of C, Db, D, Eb, E, F, Gb,
	G, Ab, A, Bb, B. ``Octave`` is a run of decimal digits and defaults to 0 when
	absent.

	Parameters:
		text: The note text, e.g. ``"Db3"`` or ``"Ab"``.

	Returns:
		The parsed `Note`.

	Raises:
		InvalidNameError: If the text does not start with a recognised note name
			(``"Cb2"``, ``"C#4"``, ``"H"``).
		InvalidOctaveError: If the octave is not a non-negative integer (``"Gb-2"``).
		NoteOverflowError: If the octave is too large to represent.

	Example:
		```python
		parse("C0")     # → Note(value=0)
		parse("Db3")    # → Note(value=37)
		parse("Bb10")   # → Note(value=130)
		parse("Ab")     # → Note(value=8)
		```
	"""

	match = _NAME_PATTERN.match(text)

	if match is None or match.group(1) not in minstrel.constants.NOTE_NAME_TO_PC:
		raise InvalidNameError(text, f"Invalid note name in {text!r}. Expected one of {', '.join(minstrel.constants.PC_TO_NOTE_NAME)}.")

	name, remainder = match.groups()

	if not remainder:
		octave = 0

	elif _OCTAVE_PATTERN.fullmatch(remainder):
		digits = remainder.lstrip("0") or "0"

		if len(digits) > _MAX_OCTAVE_DIGITS:
			raise NoteOverflowError(f"Octave {remainder!r} in {text!r} is too large")

		octave = int(digits)

	else:
		raise InvalidOctaveError(text, f"Invalid octave {remainder!r} in {text!r}. Expected a non-negative integer.")

	note = Note.from_pitch_class(minstrel.constants.NOTE_NAME_TO_PC[name], octave)

	logger.debug(f"Parsed {text!r} as note value {note.value}")

	return note


def format_note (note: Note, include_octave: bool = False) -> str:

	"""
	Render a note as its name, optionally followed by its octave.
	"""

	return note.format(include_octave=include_octave)


def class_only (note: Note) -> Note:

	"""
	Return the pitch class of ``note`` as a note in octave 0.
	"""

	return note.class_only()


def transpose_up (note: Note, semitones: int) -> Note:

	"""
	Return ``note`` moved up by ``semitones``.
	"""

	return note.transpose_up(semitones)


def transpose_down (note: Note, semitones: int) -> Note:

	"""
	Return ``note`` moved down by ``semitones``.
	"""

	return note.transpose_down(semitones)


def interval_between (a: Note, b: Note) -> int:

	"""Return the unsigned interval in semitones between two notes.

	The order of the arguments does not matter.

	Example:
		```python
		interval_between(Note(21), Note(27))   # → 6
		interval_between(Note(27), Note(21))   # → 6
		```
	"""

	return a.interval_to(b)


def enumerate_from (note: Note) -> NoteIterator:

	"""
	Return an unbounded ascending iterator whose first item is ``note``.
	"""

	return note.ascending()

"""Pitch class constants.

Maps the twelve canonical note names to pitch classes and back. Names are always
spelled with flats; sharps are never produced and are not accepted when parsing.

- `NOTE_NAME_TO_PC`: Maps note names (e.g. `"C"`, `"Db"`, `"Bb"`) to pitch classes (0-11)
- `PC_TO_NOTE_NAME`: Maps pitch classes to note names
- `SEMITONES_PER_OCTAVE`: Width of one octave band
- `MAX_NOTE_VALUE`: Largest representable semitone index (unsigned 64-bit ceiling)
"""

import typing


SEMITONES_PER_OCTAVE = 12

MAX_NOTE_VALUE = 2 ** 64 - 1

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"Db": 1,
	"D": 2,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"Gb": 6,
	"G": 7,
	"Ab": 8,
	"A": 9,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
]

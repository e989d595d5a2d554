"""
Minstrel - a musical pitch primitive for Python.

A `Note` is an integer semitone index (C0 = 0, Db0 = 1, C1 = 12 ...) with text
parsing, text rendering, transposition, interval calculation and ascending
enumeration. It is the building block for higher level music tooling such as
scales, chords and sequencers.

Minimal example:

    ```python
    import itertools

    import minstrel

    note = minstrel.parse("Db3")     # Note(value=37)
    note.name()                      # "Db"
    note.name_with_octave()          # "Db3"
    note + 5                         # Note(value=42), Gb3
    note - 2                         # Note(value=35), B2
    note - minstrel.Note(40)         # 3

    # Chromatic scale from C0
    [str(n) for n in itertools.islice(minstrel.Note(0).ascending(), 12)]
    ```

Package-level exports: ``Note``, ``NoteIterator``, ``parse``, ``format_note``,
``interval_between`` and the error classes.
"""

import minstrel.note


Note = minstrel.note.Note
NoteIterator = minstrel.note.NoteIterator

parse = minstrel.note.parse
format_note = minstrel.note.format_note
interval_between = minstrel.note.interval_between

NoteParseError = minstrel.note.NoteParseError
InvalidNameError = minstrel.note.InvalidNameError
InvalidOctaveError = minstrel.note.InvalidOctaveError
NoteRangeError = minstrel.note.NoteRangeError
NoteUnderflowError = minstrel.note.NoteUnderflowError
NoteOverflowError = minstrel.note.NoteOverflowError

import itertools
import logging

import minstrel

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

START = "Eb3"
LENGTH = 13

start = minstrel.parse(START)

# One octave up, ending on the start pitch class again.
run = list(itertools.islice(start.ascending(), LENGTH))

logger.info(" ".join(note.name_with_octave() for note in run))
logger.info(f"Span: {minstrel.interval_between(run[0], run[-1])} semitones")

# Transposition and intervals are different operations.
fifth_up = start + 7
logger.info(f"{start.name_with_octave()} + 7 = {fifth_up.name_with_octave()}")
logger.info(f"{fifth_up.name_with_octave()} - {start.name_with_octave()} = {fifth_up - start}")

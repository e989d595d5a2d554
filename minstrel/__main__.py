import argparse
import itertools
import logging
import os
import typing

import yaml

import minstrel.note


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "minstrel.yaml"
DEFAULT_RUN_LENGTH = 12


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def build_parser () -> argparse.ArgumentParser:

	"""
	Build the command-line argument parser.
	"""

	parser = argparse.ArgumentParser(prog="minstrel", description="Parse, transpose and enumerate musical notes.")
	parser.add_argument("notes", nargs="*", help="Notes to describe, e.g. C4 Db3 Ab")
	parser.add_argument("--run", metavar="START", help="Print an ascending chromatic run from START")
	parser.add_argument("--length", type=int, default=None, help="Number of notes in a --run")
	parser.add_argument("--interval", nargs=2, metavar=("A", "B"), help="Print the interval in semitones between two notes")
	parser.add_argument("--no-octave", action="store_true", help="Render note names without their octave")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to a YAML config file")
	parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

	return parser


def describe (note: minstrel.note.Note, include_octave: bool) -> str:

	"""
	Return a one-line summary of a note.
	"""

	return f"{note.format(include_octave=include_octave)}\tvalue={note.value}\tpitch_class={note.pitch_class}\toctave={note.octave}"


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the minstrel command line.
	"""

	parser = build_parser()
	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	if not args.notes and args.run is None and args.interval is None:
		parser.error("Nothing to do: give one or more notes, --run or --interval")

	config = load_config(args.config)

	display_config = config.get('display') or {}
	run_config = config.get('run') or {}

	include_octave = display_config.get('include_octave', True) and not args.no_octave
	length = args.length if args.length is not None else run_config.get('length', DEFAULT_RUN_LENGTH)

	if isinstance(length, bool) or not isinstance(length, int):
		parser.error(f"run.length must be an integer, got {length!r}")

	if length < 0:
		parser.error("--length cannot be negative")

	try:
		for text in args.notes:
			print(describe(minstrel.note.parse(text), include_octave))

		if args.interval is not None:
			a, b = (minstrel.note.parse(text) for text in args.interval)
			print(minstrel.note.interval_between(a, b))

		if args.run is not None:
			start = minstrel.note.parse(args.run)
			run = itertools.islice(minstrel.note.enumerate_from(start), length)
			print(" ".join(note.format(include_octave=include_octave) for note in run))

	except (minstrel.note.NoteParseError, minstrel.note.NoteRangeError) as e:
		logger.error(f"{e}")
		return 1

	return 0


if __name__ == "__main__":
	raise SystemExit(main())

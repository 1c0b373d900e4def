"""Loader for a local ``.env`` file of ``KEY=VALUE`` lines.

Variables already present in the environment always take precedence over
the file. A missing or unreadable file is not an error, and a line that
cannot be decoded or applied is skipped on its own.
"""

import logging
import os

logger = logging.getLogger(__name__)


def parse_line(line):
	"""Return ``(key, value)`` for a usable line, otherwise ``None``."""
	line = line.strip()
	if not line or line.startswith("#"):
		return None
	key, sep, value = line.partition("=")
	if not sep:
		return None
	key = key.strip()
	if not key:
		return None
	return key, value.strip()


def load_dotenv(path=".env", environ=None):
	if environ is None:
		environ = os.environ

	try:
		with open(path, "rb") as f:
			raw_lines = f.readlines()
	except OSError as e:
		logger.debug("Skipping env file %s: %s", path, e)
		return

	applied = 0
	for lineno, raw in enumerate(raw_lines, 1):
		try:
			line = raw.decode("utf-8")
		except UnicodeDecodeError:
			logger.debug("Skipping undecodable line %d of %s", lineno, path)
			continue
		pair = parse_line(line)
		if pair is None:
			continue
		key, value = pair
		if key in environ:
			continue
		try:
			environ[key] = value
		except ValueError as e:
			# os.environ rejects NUL bytes
			logger.debug("Skipping line %d of %s: %s", lineno, path, e)
			continue
		applied += 1

	logger.debug("Loaded %d variable(s) from %s", applied, path)

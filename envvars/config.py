"""Server settings read from the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_ENV_FILE = ".env"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
	host: str = DEFAULT_HOST
	port: int = DEFAULT_PORT
	env_file: str = DEFAULT_ENV_FILE
	log_level: str = DEFAULT_LOG_LEVEL

	@classmethod
	def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
		"""Build a Config, raising ValueError for a bad PORT or LOG_LEVEL."""
		if environ is None:
			environ = os.environ

		port = environ.get("PORT", str(DEFAULT_PORT))
		try:
			port = int(port)
		except ValueError:
			raise ValueError("PORT must be an integer, got %r" % port) from None

		log_level = environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
		if not isinstance(logging.getLevelName(log_level), int):
			raise ValueError("Unknown LOG_LEVEL %r" % log_level)

		return cls(
			host=environ.get("HOST", DEFAULT_HOST),
			port=port,
			env_file=environ.get("ENV_FILE", DEFAULT_ENV_FILE),
			log_level=log_level,
		)

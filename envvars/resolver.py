"""Lookup of the public variables shown by the server."""

from typing import Mapping, NamedTuple, Sequence

NOT_SET = "Not set"

# Order here is the order of the HTML rows and of the JSON list.
PUBLIC_KEYS = ("APP_NAME", "API_URL", "ENVIRONMENT", "VERSION")


class EnvItem(NamedTuple):
	key: str
	value: str

	def to_dict(self) -> dict:
		return {"key": self.key, "value": self.value}


def env_value(key: str, environ: Mapping[str, str]) -> str:
	"""Trimmed value of ``key``, or ``NOT_SET`` when unset or blank."""
	value = (environ.get(key) or "").strip()
	if not value:
		return NOT_SET
	return value


def env_items(environ: Mapping[str, str], keys: Sequence[str] = PUBLIC_KEYS) -> list:
	return [EnvItem(key, env_value(key, environ)) for key in keys]

"""Serve a fixed list of public environment variables as HTML or JSON."""

from envvars.app import create_app
from envvars.envfile import load_dotenv
from envvars.resolver import NOT_SET, PUBLIC_KEYS, EnvItem, env_items, env_value

__all__ = [
	"NOT_SET",
	"PUBLIC_KEYS",
	"EnvItem",
	"create_app",
	"env_items",
	"env_value",
	"load_dotenv",
]

"""Pytest configuration and fixtures."""

import pytest

from envvars.app import create_app


@pytest.fixture
def environ():
	"""A private environment source so tests never touch os.environ."""
	return {}


@pytest.fixture
def env_file(tmp_path):
	"""Write a dotenv file and return its path."""

	def write(content):
		path = tmp_path / ".env"
		path.write_text(content, encoding="utf-8")
		return str(path)

	return write


@pytest.fixture
def client(environ, tmp_path):
	app = create_app(environ, dotenv_path=str(tmp_path / "missing.env"))
	app.testing = True
	return app.test_client()


@pytest.fixture
def unset_env(monkeypatch):
	"""Remove process variables for one test; monkeypatch restores them after."""

	def unset(*names):
		for name in names:
			# setenv first so teardown also removes anything the test adds
			monkeypatch.setenv(name, "")
			monkeypatch.delenv(name)

	return unset

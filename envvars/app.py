#!/usr/bin/env python

import logging
import os
import sys

from flask import Flask, current_app, jsonify, render_template

from envvars.config import DEFAULT_ENV_FILE, Config
from envvars.envfile import load_dotenv
from envvars.resolver import NOT_SET, PUBLIC_KEYS, env_items

TITLE = "Server Compass Demo Environment Variables"

logger = logging.getLogger(__name__)


def create_app(environ=None, dotenv_path=DEFAULT_ENV_FILE, load_env_file=True):
	"""Build the Flask app.

	``environ`` is the variable source the handlers read from; it defaults to
	``os.environ``. The dotenv file is applied to it once, here.
	"""
	if environ is None:
		environ = os.environ
	if load_env_file:
		load_dotenv(dotenv_path, environ)

	app = Flask(__name__)
	app.config["ENVIRON"] = environ
	app.config["PUBLIC_KEYS"] = PUBLIC_KEYS

	@app.route("/")
	def index():
		return render_template(
			"environ.html",
			title=TITLE,
			envs=_items(),
			not_set=NOT_SET,
		)

	@app.route("/api/env")
	def api_env():
		return jsonify(envs=[item.to_dict() for item in _items()])

	return app


def _items():
	return env_items(current_app.config["ENVIRON"], current_app.config["PUBLIC_KEYS"])


def main():
	logging.basicConfig(
		level=logging.INFO,
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
		handlers=[logging.StreamHandler(sys.stdout)],
	)

	# The env file may set PORT and friends, so it is loaded before reading config.
	env_file = os.environ.get("ENV_FILE", DEFAULT_ENV_FILE)
	load_dotenv(env_file)
	config = Config.from_environ()
	logging.getLogger().setLevel(config.log_level)
	if config.env_file != env_file:
		logger.warning("ENV_FILE=%s set inside %s is ignored", config.env_file, env_file)

	app = create_app(load_env_file=False)
	logger.info(
		"Serving %s on %s:%d (env file %s)",
		", ".join(PUBLIC_KEYS), config.host, config.port, env_file,
	)
	app.run(host=config.host, port=config.port)
	return 0


if __name__ == "__main__":
	sys.exit(main())

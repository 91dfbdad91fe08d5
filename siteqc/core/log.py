# (c) Copyright Datacraft, 2026
"""Logging setup."""
import logging
from logging.config import dictConfig
from pathlib import Path

import yaml

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(config_path: Path | None = None, level: str = "INFO") -> None:
	"""
	Configure logging from a YAML dictConfig file.

	Falls back to a basic stream handler at ``level`` when no file is given
	or the file does not exist.
	"""
	if config_path is not None and config_path.exists() and config_path.is_file():
		with open(config_path, "r") as stream:
			config = yaml.safe_load(stream)

		dictConfig(config)
		return

	logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

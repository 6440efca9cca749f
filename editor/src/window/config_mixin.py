"""Configuration management for EllipseEditor"""

import os
import json
from utils.logger import loggerRaise
from constants import (
	CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
)

DEFAULT_CONFIG = {
	'window_width': DEFAULT_WINDOW_WIDTH,
	'window_height': DEFAULT_WINDOW_HEIGHT,
	'log_level': 'WARNING',
}


def default_config_dir():
	"""Per-user config directory (~/.ellipse_editor)"""
	return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


def read_config_file(config_file):
	"""Read settings from a config file, filling in defaults.

	Missing files yield the defaults; unknown keys are ignored.

	Raises:
		ValueError: If the file is not a JSON object
		json.JSONDecodeError: If the file is not valid JSON
	"""
	config = dict(DEFAULT_CONFIG)
	if not os.path.exists(config_file):
		return config
	with open(config_file, 'r', encoding='utf-8') as f:
		data = json.load(f)
	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_file} must contain a JSON object")
	for key in DEFAULT_CONFIG:
		if key in data:
			config[key] = data[key]
	return config


class ConfigMixin:
	"""Configuration file operations: window size and log level

	Expects self.config_dir and self.config_file to be set before use.
	"""

	def _init_config_paths(self, config_dir=None):
		"""Set config_dir/config_file, defaulting to the per-user directory"""
		self.config_dir = config_dir if config_dir else default_config_dir()
		self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
		self.config = dict(DEFAULT_CONFIG)

	def _load_config(self):
		"""Load settings from config file"""
		try:
			self.config = read_config_file(self.config_file)
		except Exception as e:
			loggerRaise(e, "Error loading config")
		return self.config

	def _save_config(self):
		"""Save settings to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			self.config['window_width'] = self.width()
			self.config['window_height'] = self.height()

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(self.config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")

"""Configuration management for the demo window"""

import os
import json
import logging

from constants import DEFAULT_DEMO, DEMO_NAMES, TICK_INTERVAL_MS
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


def load_config(config_file):
	"""Read the JSON config, falling back to defaults.

	Missing files, unreadable files and bad values all yield defaults;
	problems are logged, never raised.

	Returns:
		dict with 'last_demo' and 'tick_interval_ms'
	"""
	config = {
		'last_demo': DEFAULT_DEMO,
		'tick_interval_ms': TICK_INTERVAL_MS,
	}
	if not os.path.exists(config_file):
		return config

	try:
		with open(config_file, 'r', encoding='utf-8') as f:
			data = json.load(f)
	except (OSError, ValueError) as e:
		logger.warning("Could not read config %s: %s", config_file, e)
		return config

	if not isinstance(data, dict):
		logger.warning("Ignoring config %s: not a JSON object", config_file)
		return config

	last_demo = data.get('last_demo')
	if last_demo in DEMO_NAMES:
		config['last_demo'] = last_demo
	elif last_demo is not None:
		logger.warning("Unknown demo '%s' in config, using '%s'", last_demo, DEFAULT_DEMO)

	interval = data.get('tick_interval_ms')
	if isinstance(interval, int) and not isinstance(interval, bool) and interval > 0:
		config['tick_interval_ms'] = interval

	return config


class ConfigMixin:
	"""Configuration file load/save"""

	# Expected state variables (initialized in main class):
	# - config_dir, config_file: str
	# - current_demo: str
	# - tick_interval_ms: int

	def _load_config(self):
		"""Load settings from config file"""
		config = load_config(self.config_file)
		self.last_demo = config['last_demo']
		self.tick_interval_ms = config['tick_interval_ms']
		return config

	def _save_config(self):
		"""Save settings to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)

			config = {
				'last_demo': self.current_demo,
				'tick_interval_ms': self.tick_interval_ms,
			}

			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			loggerRaise(e, "Error saving config")

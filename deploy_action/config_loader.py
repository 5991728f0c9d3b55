import logging
import os

import yaml

from deploy_action import constants
from deploy_action.util.common_util import get_package_path

logger = logging.getLogger(__name__)


class AppConfig:
    _instance = None  # Singleton instance

    def __new__(cls, config_path=None):
        if cls._instance is None:
            instance = super(AppConfig, cls).__new__(cls)
            instance._load_config(config_path or cls.default_path())
            cls._instance = instance
        return cls._instance

    @staticmethod
    def default_path():
        return os.getenv(constants.CONFIG_PATH_ENV) or str(get_package_path() / constants.CONFIG_FILENAME)

    @classmethod
    def reset(cls):
        """Drop the cached instance so the next call reloads from disk."""
        cls._instance = None

    def _load_config(self, config_path):
        logger.debug(f"Loading configuration from {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found: {config_path}")
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r") as file:
            self.config = yaml.safe_load(file) or {}

    def get(self, key_path, default=None):
        """Fetch nested keys using dot notation, e.g. get('poller.max_attempts')"""
        keys = key_path.split(".")
        value = self.config
        for key in keys:
            if not isinstance(value, dict):
                return default
            value = value.get(key, None)
            if value is None:
                return default
        return value

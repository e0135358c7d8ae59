"""
Configuration management for the pairings publisher.
"""

import os
import logging
import yaml
from typing import Dict, Any, Optional

from models.tournament import PublishConfig

logger = logging.getLogger(__name__)

# Environment variable -> key in the 'publish' section
ENVIRONMENT_OVERRIDES = {
    'FTP_HOST': 'host',
    'FTP_USER': 'user',
    'FTP_PASS': 'password',
    'FTP_DEST': 'destination_dir',
    'FTP_PORT': 'port',
}

FALSE_STRINGS = ('false', 'no', 'off', '0', '')


class ConfigManager:
    """Manages configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, merged over the defaults."""
        config = ConfigManager.get_default_config()
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return config
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return config

        if not isinstance(loaded, dict):
            logger.warning(f"Configuration file '{config_file}' is not a mapping. Using default configuration.")
            return config

        loaded_publish = loaded.get('publish') or {}
        if not isinstance(loaded_publish, dict):
            logger.warning(f"Section 'publish' in '{config_file}' is not a mapping. Using default configuration.")
            return config

        publish = dict(config['publish'])
        publish.update(loaded_publish)
        config.update(loaded)
        config['publish'] = publish
        return config

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'source_file': 'tournament.xml',
            'output_file': 'output.html',
            'min_content_length': 10,
            'publish': {
                'enabled': True,
                'host': '',
                'port': 21,
                'user': '',
                'password': '',
                'destination_dir': '',
                'remote_name': 'index.html',
                'timeout': 30
            }
        }

    @staticmethod
    def apply_environment(config: Dict[str, Any],
                          environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """Override FTP settings with FTP_* environment variables."""
        if environ is None:
            environ = os.environ

        publish = config.setdefault('publish', {})
        for variable, key in ENVIRONMENT_OVERRIDES.items():
            value = environ.get(variable)
            if value:
                publish[key] = value
        return config

    @staticmethod
    def get_publish_config(config: Dict[str, Any]) -> PublishConfig:
        """Build the explicit publisher settings from a loaded configuration."""
        publish = config.get('publish') or {}
        return PublishConfig(
            host=str(publish.get('host') or ''),
            user=str(publish.get('user') or ''),
            password=str(publish.get('password') or ''),
            destination_dir=str(publish.get('destination_dir') or ''),
            remote_name=str(publish.get('remote_name') or 'index.html'),
            port=int(publish.get('port') or 21),
            timeout=float(publish.get('timeout') or 30)
        )

    @staticmethod
    def is_publish_enabled(config: Dict[str, Any]) -> bool:
        """Read publish.enabled, accepting quoted true/false strings."""
        value = (config.get('publish') or {}).get('enabled', True)
        if isinstance(value, str):
            return value.strip().lower() not in FALSE_STRINGS
        return bool(value)

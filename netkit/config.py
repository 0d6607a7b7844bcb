"""
Configuration management for netkit.

Values are read from ``NETKIT_*`` environment variables on every call so
that the command line (``--debug``) and tests can change them at runtime.
"""

import os
import logging
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10.0

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


class Config:
    """Environment-backed configuration."""

    prefix = "NETKIT_"

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value from the environment.

        Args:
            key: Configuration key, e.g. 'request_timeout'
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return os.getenv(f"{self.prefix}{key.upper()}", default)

    def get_request_timeout(self, default: float = DEFAULT_REQUEST_TIMEOUT) -> float:
        """
        Get request timeout for the geolocation lookup.

        Args:
            default: Default timeout value

        Returns:
            Timeout in seconds, bounded to 1-30
        """
        try:
            timeout = float(self.get_config_value('request_timeout', default))
        except (ValueError, TypeError):
            logger.warning("Ignoring non-numeric NETKIT_REQUEST_TIMEOUT")
            return default
        return max(1.0, min(30.0, timeout))

    def is_debug_mode(self) -> bool:
        return os.getenv('NETKIT_DEBUG', 'false').lower() in _TRUE_VALUES

    def get_debug_level(self) -> str:
        """
        Get debug level for controlling verbosity.

        Returns:
            'off' when debug mode is disabled, otherwise
            'basic', 'detailed' or 'verbose'
        """
        if not self.is_debug_mode():
            return 'off'

        level = os.getenv('NETKIT_DEBUG_LEVEL', 'basic').lower()
        if level in ('basic', 'detailed', 'verbose'):
            return level
        return 'basic'


# Global configuration instance
config = Config()

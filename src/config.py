"""Configuration management for Currency Converter."""
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
import yaml
from dotenv import load_dotenv
from src.utils.errors import ConfigurationError
from src.utils.logging import setup_logging
import logging

logger = logging.getLogger(__name__)


DEFAULT_CURRENCIES: Tuple[str, ...] = ("EUR", "RON", "GBP", "AED", "RUB")


class Config:
    """Application configuration."""

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        # Load environment variables from .env
        load_dotenv()

        # Load YAML config
        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            self._config = yaml.safe_load(f)

        if not self._config:
            raise ConfigurationError(f"Empty configuration file: {self.config_path}")

        # Validate required sections
        self._validate()

        # Setup logging
        log_config = self._config.get('logging', {})
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True),
            console=log_config.get('console', False)
        )

        logger.info("Configuration loaded successfully")

    def _validate(self) -> None:
        """Validate required configuration sections."""
        required_sections = ['app', 'api']

        for section in required_sections:
            if section not in self._config:
                raise ConfigurationError(f"Missing required config section: {section}")

        if 'default_service' not in self._config['api']:
            raise ConfigurationError("Missing api.default_service in config")

        currencies = self._config['app'].get('currencies')
        if currencies is not None:
            if not isinstance(currencies, list) or not currencies:
                raise ConfigurationError("app.currencies must be a non-empty list")
            for code in currencies:
                code = str(code).upper()
                if len(code) != 3 or not code.isalpha():
                    raise ConfigurationError(
                        f"Invalid currency code in app.currencies: {code}. Expect 3-letter ISO code."
                    )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.

        Args:
            key: Dot-separated key (e.g., "api.default_service")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable."""
        return os.getenv(key, default)

    def require_env(self, key: str) -> str:
        """Get required environment variable or raise error."""
        value = os.getenv(key)
        if not value:
            raise ConfigurationError(f"Required environment variable not set: {key}")
        return value

    @property
    def app_name(self) -> str:
        """Get application name."""
        return self.get('app.name', 'Currency Converter')

    @property
    def app_version(self) -> str:
        """Get application version."""
        return self.get('app.version', '0.1.0')

    @property
    def debug(self) -> bool:
        """Get debug mode."""
        return self.get('app.debug', False)

    @property
    def currencies(self) -> Tuple[str, ...]:
        """Ordered currency codes offered by the selection stages."""
        codes = self.get('app.currencies')
        if not codes:
            return DEFAULT_CURRENCIES
        return tuple(str(c).upper() for c in codes)

    @property
    def default_service(self) -> str:
        """Get the canonical name of the conversion service."""
        return self.get('api.default_service', 'exchangerate_api')


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: str = "config.yaml") -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(config_path)
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global configuration instance."""
    global _config
    _config = None

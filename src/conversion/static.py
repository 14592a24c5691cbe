"""Offline conversion service backed by a configured rate table."""
from __future__ import annotations

from typing import Dict, Optional

from src.config import Config, get_config, load_config
from src.conversion.base import BaseConversionService
from src.utils.errors import ConfigurationError, ServiceError
from src.utils.logging import get_logger


logger = get_logger(__name__)


class StaticConversionService(BaseConversionService):
    """Converts through a common reference currency.

    ``rates`` maps each code to its units per one reference unit, e.g.
    ``{"EUR": 1.0, "RON": 4.97}``.
    """

    NAME = "static"

    def __init__(self, rates: Optional[Dict[str, float]] = None, config: Optional[Config] = None) -> None:
        if rates is None:
            if config is None:
                try:
                    config = get_config()
                except Exception:
                    config = load_config()
            rates = config.get("api.static.rates", {}) or {}
        if not rates:
            raise ConfigurationError("No rates configured for the static conversion service")
        self.rates: Dict[str, float] = {str(k).upper(): float(v) for k, v in rates.items()}

    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        self.validate_request(amount, from_code, to_code)
        for code in (from_code, to_code):
            if self.rates.get(code, 0) <= 0:
                raise ServiceError(f"Conversion failed: unsupported-code {code}", error_type="unsupported-code")
        converted = amount * self.rates[to_code] / self.rates[from_code]
        logger.info(f"Static conversion {amount:.2f} {from_code} = {converted:.2f} {to_code}")
        return converted

"""ExchangeRate-API pair conversion client."""
from __future__ import annotations

from typing import Optional

import httpx

from src.config import Config, get_config, load_config
from src.conversion.base import BaseConversionService, PairConversion
from src.utils.decorators import log_execution
from src.utils.errors import DecodeError, ServiceError, TransportError
from src.utils.logging import get_logger


logger = get_logger(__name__)


class ExchangeRateApiClient(BaseConversionService):
    NAME = "exchangerate_api"

    def __init__(self, config: Optional[Config] = None, api_key: Optional[str] = None) -> None:
        if config is None:
            try:
                config = get_config()
            except Exception:
                config = load_config()
        self.base_url: str = str(
            config.get("api.exchangerate_api.base_url", "https://v6.exchangerate-api.com/v6")
        ).rstrip("/")
        self.timeout: float = float(config.get("api.exchangerate_api.timeout", 10))
        # Key comes from the environment (or .env), never from source
        key_env = config.get("api.exchangerate_api.api_key_env", "EXCHANGE_RATE_API_KEY")
        self.api_key: str = api_key or config.require_env(key_env)

    def _mask(self, text: str) -> str:
        return text.replace(self.api_key, "***") if self.api_key else text

    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        return self.get_pair(amount, from_code, to_code).conversion_result

    @log_execution(log_args=False, log_result=False)
    def get_pair(self, amount: float, from_code: str, to_code: str) -> PairConversion:
        self.validate_request(amount, from_code, to_code)

        url = f"{self.base_url}/{self.api_key}/pair/{from_code}/{to_code}/{amount:.2f}"
        logger.info(f"Requesting conversion {amount:.2f} {from_code} -> {to_code}")

        try:
            with httpx.Client(timeout=self.timeout) as client:
                resp = client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = self._mask(str(e)) or type(e).__name__
            logger.error(f"ExchangeRate-API request failed: {message}")
            raise TransportError(message) from e

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"ExchangeRate-API returned a non-JSON body (status {resp.status_code})")
            raise DecodeError("Response body is not valid JSON") from e

        if not isinstance(data, dict):
            raise DecodeError("Response body is not a JSON object")

        if data.get("result") != "success":
            error_type = str(data.get("error-type", "unknown"))
            logger.error(f"ExchangeRate-API reported failure: {error_type}")
            raise ServiceError(f"Conversion failed: {error_type}", error_type=error_type)

        pair = PairConversion.from_payload(data, from_code, to_code)
        logger.info(
            f"Converted {amount:.2f} {pair.base_code} = {pair.conversion_result:.2f} {pair.target_code}"
        )
        return pair

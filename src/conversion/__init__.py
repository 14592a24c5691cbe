"""Conversion service factory and exports."""

from typing import Optional

from src.config import Config

from .base import BaseConversionService, PairConversion
from .exchangerate_api import ExchangeRateApiClient
from .static import StaticConversionService


def get_service(service_name: str, config: Optional[Config] = None) -> BaseConversionService:
    """Get conversion service by canonical name.

    Canonical names:
    - "exchangerate_api"
    - "static"
    """
    if service_name == "exchangerate_api":
        return ExchangeRateApiClient(config=config)
    if service_name == "static":
        return StaticConversionService(config=config)
    raise ValueError(f"Unknown conversion service: {service_name}")


__all__ = [
    "BaseConversionService",
    "PairConversion",
    "ExchangeRateApiClient",
    "StaticConversionService",
    "get_service",
]

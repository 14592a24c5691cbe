"""Conversion service base classes and data contracts."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.utils.errors import DecodeError, ValidationError


@dataclass
class PairConversion:
    """Decoded result of one pair conversion lookup.

    Documentation and terms-of-use fields from the remote payload are ignored.
    """

    result: str  # "success" | "error"
    base_code: str
    target_code: str
    conversion_result: float
    conversion_rate: Optional[float] = None
    time_last_update: Optional[str] = None
    time_next_update: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any], base: str, target: str) -> "PairConversion":
        value = data.get("conversion_result")
        if value is None or isinstance(value, bool):
            raise DecodeError("Response is missing conversion_result")
        try:
            converted = float(value)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid conversion_result: {value!r}") from e

        rate = data.get("conversion_rate")
        try:
            rate = float(rate) if rate is not None else None
        except (TypeError, ValueError):
            rate = None

        pair = cls(
            result=str(data.get("result", "")),
            base_code=str(data.get("base_code") or base),
            target_code=str(data.get("target_code") or target),
            conversion_result=converted,
            conversion_rate=rate,
            time_last_update=data.get("time_last_update_utc"),
            time_next_update=data.get("time_next_update_utc"),
        )
        pair.validate()
        return pair

    def validate(self) -> None:
        if not math.isfinite(self.conversion_result) or self.conversion_result < 0:
            raise DecodeError(f"Invalid conversion_result: {self.conversion_result}")
        if self.conversion_rate is not None and self.conversion_rate <= 0:
            raise DecodeError(f"Invalid conversion_rate: {self.conversion_rate}")


class BaseConversionService(ABC):
    """Abstract base class for conversion services.

    ``convert`` performs exactly one lookup per call and either returns the
    converted amount or raises a ``ConversionError`` subclass.
    """

    NAME: str = "base"

    @abstractmethod
    def convert(self, amount: float, from_code: str, to_code: str) -> float:
        """Convert ``amount`` of ``from_code`` into ``to_code``."""

    @staticmethod
    def validate_currency_code(code: str) -> None:
        """Validate a 3-letter ISO currency code in uppercase."""
        if not code or len(code) != 3 or not code.isalpha() or code != code.upper():
            raise ValidationError(
                f"Invalid currency code: {code}. Expect 3-letter uppercase ISO code."
            )

    @classmethod
    def validate_request(cls, amount: float, from_code: str, to_code: str) -> None:
        """Validate a conversion request before it goes out."""
        cls.validate_currency_code(from_code)
        cls.validate_currency_code(to_code)
        if amount is None or not math.isfinite(amount) or amount < 0:
            raise ValidationError(f"Invalid amount: {amount}")

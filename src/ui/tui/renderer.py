from __future__ import annotations

"""Formatting helpers for the TUI."""

from typing import Optional, Sequence

from src.utils.errors import (
    AmountParseError,
    DecodeError,
    ServiceError,
    TransportError,
)

from .config import (
    CURSOR,
    DECODE_ERROR_TEXT,
    PARSE_ERROR_TEXT,
    RESULT_LABEL,
    SERVICE_ERROR_TEXT,
    TRANSPORT_ERROR_TEXT,
)


def format_amount(amount: Optional[float], currency: Optional[str] = None) -> str:
    if amount is None:
        return "—"
    if not currency:
        return f"{amount:.2f}"
    return f"{amount:.2f} {currency}"


def format_result_line(amount: float, source: str, result: float, target: str) -> str:
    return f"{RESULT_LABEL}: {format_amount(amount, source)} = {format_amount(result, target)}"


def format_currency_list(currencies: Sequence[str], active: int) -> str:
    lines = []
    for i, code in enumerate(currencies):
        cursor = CURSOR if i == active else " "
        lines.append(f"{cursor} {code}\n")
    return "".join(lines)


def format_error(error: Exception) -> str:
    """Human message for a failure, keeping its kind visible."""
    if isinstance(error, AmountParseError):
        return PARSE_ERROR_TEXT
    if isinstance(error, TransportError):
        return f"{TRANSPORT_ERROR_TEXT} ({error})."
    if isinstance(error, ServiceError):
        return f"{SERVICE_ERROR_TEXT} ({error.error_type})."
    if isinstance(error, DecodeError):
        return DECODE_ERROR_TEXT
    return str(error)

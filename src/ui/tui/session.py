from __future__ import annotations

"""Session state for the guided conversion flow."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from src.config import DEFAULT_CURRENCIES
from src.utils.errors import CurrencyConverterError


CURRENCIES: Tuple[str, ...] = DEFAULT_CURRENCIES


class Stage(Enum):
    """Input stage of the conversion flow. Stages only move forward."""

    AMOUNT_ENTRY = "amount_entry"
    SOURCE_SELECT = "source_select"
    TARGET_SELECT = "target_select"
    RESULT_SHOWN = "result_shown"


@dataclass
class Session:
    """The single mutable UI state of one program run.

    Currencies are referenced by index into the currency tuple only; codes are
    resolved when the request is made and when the result is rendered.
    """

    stage: Stage = Stage.AMOUNT_ENTRY
    amount_text: str = ""
    amount: Optional[float] = None
    source_index: int = 0
    target_index: int = 0
    last_error: Optional[CurrencyConverterError] = None
    result: Optional[float] = None

    @property
    def succeeded(self) -> bool:
        return self.stage is Stage.RESULT_SHOWN and self.last_error is None and self.result is not None

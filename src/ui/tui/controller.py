from __future__ import annotations

"""Interaction controller: the stage transition table and its driver.

Every input event is looked up in ``TRANSITIONS`` by ``(stage, event kind)``.
Pairs missing from the table leave the session untouched.
"""

import math
from typing import Callable, Dict, Sequence, Tuple

from src.conversion.base import BaseConversionService
from src.utils.errors import AmountParseError, ConversionError
from src.utils.logging import get_logger

from .events import EventKind, InputEvent
from .session import CURRENCIES, Session, Stage
from .view import render_view


logger = get_logger(__name__)

Handler = Callable[[Session, InputEvent, BaseConversionService, Sequence[str]], bool]


def parse_amount(text: str) -> float:
    """Parse typed text as a non-negative decimal number."""
    try:
        value = float(text.strip())
    except ValueError as e:
        raise AmountParseError(text) from e
    if not math.isfinite(value) or value < 0:
        raise AmountParseError(text)
    # "-0" parses as -0.0
    return abs(value)


def _append_character(session, event, service, currencies) -> bool:
    session.amount_text += event.char or ""
    return False


def _erase(session, event, service, currencies) -> bool:
    if session.amount_text:
        session.amount_text = session.amount_text[:-1]
    return False


def _confirm_amount(session, event, service, currencies) -> bool:
    try:
        session.amount = parse_amount(session.amount_text)
    except AmountParseError as e:
        session.last_error = e
        return False
    session.last_error = None
    session.stage = Stage.SOURCE_SELECT
    return False


def _clamp(index: int, currencies: Sequence[str]) -> int:
    return max(0, min(index, len(currencies) - 1))


def _source_up(session, event, service, currencies) -> bool:
    session.source_index = _clamp(session.source_index - 1, currencies)
    return False


def _source_down(session, event, service, currencies) -> bool:
    session.source_index = _clamp(session.source_index + 1, currencies)
    return False


def _confirm_source(session, event, service, currencies) -> bool:
    session.stage = Stage.TARGET_SELECT
    return False


def _target_up(session, event, service, currencies) -> bool:
    session.target_index = _clamp(session.target_index - 1, currencies)
    return False


def _target_down(session, event, service, currencies) -> bool:
    session.target_index = _clamp(session.target_index + 1, currencies)
    return False


def _confirm_target(session, event, service, currencies) -> bool:
    source = currencies[session.source_index]
    target = currencies[session.target_index]
    try:
        session.result = service.convert(session.amount, source, target)
        session.last_error = None
    except ConversionError as e:
        logger.warning(
            f"Conversion {source} -> {target} failed: {e}",
            extra={"error": str(e), "error_kind": type(e).__name__},
        )
        session.result = None
        session.last_error = e
    # Failures also end on the result screen
    session.stage = Stage.RESULT_SHOWN
    return False


def _quit(session, event, service, currencies) -> bool:
    return True


TRANSITIONS: Dict[Tuple[Stage, EventKind], Handler] = {
    (Stage.AMOUNT_ENTRY, EventKind.CHARACTER): _append_character,
    (Stage.AMOUNT_ENTRY, EventKind.ERASE): _erase,
    (Stage.AMOUNT_ENTRY, EventKind.CONFIRM): _confirm_amount,
    (Stage.SOURCE_SELECT, EventKind.MOVE_UP): _source_up,
    (Stage.SOURCE_SELECT, EventKind.MOVE_DOWN): _source_down,
    (Stage.SOURCE_SELECT, EventKind.CONFIRM): _confirm_source,
    (Stage.TARGET_SELECT, EventKind.MOVE_UP): _target_up,
    (Stage.TARGET_SELECT, EventKind.MOVE_DOWN): _target_down,
    (Stage.TARGET_SELECT, EventKind.CONFIRM): _confirm_target,
}
TRANSITIONS.update({(stage, EventKind.QUIT): _quit for stage in Stage})


def update(
    session: Session,
    event: InputEvent,
    service: BaseConversionService,
    currencies: Sequence[str] = CURRENCIES,
) -> Tuple[Session, bool]:
    """Apply one event to ``session`` in place.

    Returns the session and True when the interaction should terminate.
    """
    handler = TRANSITIONS.get((session.stage, event.kind))
    if handler is None:
        return session, False
    return session, handler(session, event, service, currencies)


class ConversionController:
    """Owns the session and feeds it events one at a time."""

    def __init__(self, service: BaseConversionService, currencies: Sequence[str] = CURRENCIES) -> None:
        if not currencies:
            raise ValueError("At least one currency is required")
        self.service = service
        self.currencies: Tuple[str, ...] = tuple(currencies)
        self.session = Session()

    def handle(self, event: InputEvent) -> bool:
        before = self.session.stage
        _, terminate = update(self.session, event, self.service, self.currencies)
        if self.session.stage is not before:
            logger.info(
                f"Stage {before.value} -> {self.session.stage.value}",
                extra={"stage": self.session.stage.value, "event": event.kind.value},
            )
        if terminate:
            logger.info("Interaction terminated", extra={"stage": self.session.stage.value})
        return terminate

    def view(self) -> str:
        return render_view(self.session, self.currencies)

from __future__ import annotations

"""View derivation. ``render_view`` is a pure function of the session."""

from typing import Sequence

from .config import (
    AMOUNT_PROMPT,
    ERROR_LABEL,
    QUIT_HINT,
    SOURCE_FOOTER,
    SOURCE_HEADER,
    TARGET_FOOTER,
    TARGET_HEADER,
)
from .renderer import format_currency_list, format_error, format_result_line
from .session import CURRENCIES, Session, Stage


def render_view(session: Session, currencies: Sequence[str] = CURRENCIES) -> str:
    if session.stage is Stage.AMOUNT_ENTRY:
        text = f"{AMOUNT_PROMPT}\n> {session.amount_text}"
        if session.last_error is not None:
            text += f"\n\n{ERROR_LABEL}: {format_error(session.last_error)}"
        return text

    if session.stage is Stage.SOURCE_SELECT:
        return (
            f"\n{SOURCE_HEADER}\n"
            + format_currency_list(currencies, session.source_index)
            + f"\n{SOURCE_FOOTER}"
        )

    if session.stage is Stage.TARGET_SELECT:
        return (
            f"\n{TARGET_HEADER}\n"
            + format_currency_list(currencies, session.target_index)
            + f"\n{TARGET_FOOTER}"
        )

    if session.succeeded:
        line = format_result_line(
            session.amount or 0.0,
            currencies[session.source_index],
            session.result,
            currencies[session.target_index],
        )
        return f"\n{line}\n\n{QUIT_HINT}"

    return f"\n{ERROR_LABEL}: {format_error(session.last_error)}\n\n{QUIT_HINT}"

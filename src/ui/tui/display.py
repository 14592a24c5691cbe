from __future__ import annotations

"""Rich display components for the TUI."""

from rich import box
from rich.markup import escape
from rich.panel import Panel

from .config import BOX, THEME, WELCOME_TEXT


def create_welcome_panel(app_name: str = "Currency Converter") -> Panel:
    return Panel(WELCOME_TEXT, title=app_name, border_style=THEME.primary, box=getattr(box, BOX.welcome))


def create_error_panel(message: str) -> Panel:
    return Panel(
        f"[bold {THEME.error}]Eroare:[/] {escape(message)}",
        title="Error",
        border_style=THEME.error,
        box=getattr(box, BOX.error),
    )

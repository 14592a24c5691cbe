from __future__ import annotations

"""TUI configuration, style constants and the fixed message set."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    neutral: str = "white"


@dataclass(frozen=True)
class BoxStyles:
    welcome: str = "DOUBLE"
    error: str = "HEAVY"


THEME = Theme()
BOX = BoxStyles()

CURSOR = ">"

AMOUNT_PROMPT = "Introdu suma de bani:"
SOURCE_HEADER = "Moneda ta:"
SOURCE_FOOTER = "Apasă Enter pentru a confirma."
TARGET_HEADER = "Moneda în care dorești să schimbi:"
TARGET_FOOTER = "Apasă Enter pentru rezultat."
RESULT_LABEL = "Rezultat"
ERROR_LABEL = "Eroare"
QUIT_HINT = "Apasă q pentru a ieși."

PARSE_ERROR_TEXT = "Suma introdusă nu este un număr pozitiv valid."
TRANSPORT_ERROR_TEXT = "Serviciul de conversie nu a putut fi contactat"
SERVICE_ERROR_TEXT = "Conversia a eșuat"
DECODE_ERROR_TEXT = "Răspunsul serviciului de conversie nu a putut fi interpretat."

WELCOME_TEXT = (
    """
[bold cyan]Convertor valutar[/bold cyan]

Săgeți sus/jos: alege moneda • Enter: confirmă • q / Ctrl-C: ieșire
    """
    .strip()
)

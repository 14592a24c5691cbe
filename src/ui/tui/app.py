from __future__ import annotations

from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.input import Input
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from rich.console import Console

from src.utils.logging import get_logger

from .controller import ConversionController
from .display import create_welcome_panel
from .input_handler import create_key_bindings


logger = get_logger(__name__)
console = Console()


class ConverterTUI:
    """Terminal User Interface for the Currency Converter.

    Events are processed one at a time on the application loop; the
    conversion request blocks the loop until it returns.
    """

    def __init__(
        self,
        controller: ConversionController,
        app_name: str = "Currency Converter",
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ) -> None:
        self.controller = controller
        self.app_name = app_name
        self.application: Application = Application(
            layout=Layout(
                HSplit([Window(content=FormattedTextControl(self.controller.view, show_cursor=False), wrap_lines=True)])
            ),
            key_bindings=create_key_bindings(self.controller.handle),
            full_screen=False,
            input=input,
            output=output,
        )

    def run(self, show_welcome: bool = True) -> None:
        """Main entry point (sync)."""
        if show_welcome:
            console.print(create_welcome_panel(self.app_name))
            console.print()

        logger.info("Interaction started")
        self.application.run()
        logger.info(
            "Interaction finished",
            extra={"stage": self.controller.session.stage.value},
        )

"""prompt_toolkit Terminal UI for the Currency Converter.

Modules:
- session.py: Stage enum and the mutable Session record
- events.py: Semantic input events
- controller.py: Transition table and ConversionController
- view.py: Pure view derivation
- renderer.py: Formatting utilities
- input_handler.py: Key bindings mapped to input events
- display.py: Rich panels printed around the interaction
- app.py: Application bootstrap
- config.py: TUI styles and the message set
"""

__all__ = [
    "app",
    "controller",
    "display",
    "events",
    "input_handler",
    "renderer",
    "session",
    "view",
    "config",
]

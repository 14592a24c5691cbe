from __future__ import annotations

"""Key bindings that translate concrete keys into semantic input events."""

from typing import Callable

from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys

from .events import InputEvent


EventSink = Callable[[InputEvent], bool]


def create_key_bindings(on_event: EventSink) -> KeyBindings:
    """Build key bindings feeding ``on_event``.

    ``on_event`` returns True when the interaction should end, in which case
    the running application is asked to exit.
    """
    kb = KeyBindings()

    def dispatch(event: KeyPressEvent, input_event: InputEvent) -> None:
        if on_event(input_event):
            event.app.exit()

    @kb.add("up")
    def _(event):
        dispatch(event, InputEvent.move_up())

    @kb.add("down")
    def _(event):
        dispatch(event, InputEvent.move_down())

    @kb.add("enter")
    def _(event):
        dispatch(event, InputEvent.confirm())

    @kb.add("backspace")
    @kb.add("delete")
    def _(event):
        dispatch(event, InputEvent.erase())

    @kb.add("q")
    @kb.add("c-c")
    def _(event):
        dispatch(event, InputEvent.quit())

    @kb.add(Keys.Any)
    def _(event):
        data = event.data or ""
        if len(data) == 1 and data.isprintable():
            dispatch(event, InputEvent.character(data))

    return kb

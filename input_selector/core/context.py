"""Input selector context — tracks the selected input.

Each press of the switch button calls advance(), which moves to the next
input in the cycle and announces it on the display.
"""

from __future__ import annotations

import logging

from input_selector.core.state_machine import InputState, successor, transition_message
from input_selector.hardware.interfaces import DisplayOutput
from input_selector.hardware.stubs import ConsoleDisplayOutput

logger = logging.getLogger(__name__)


class InputContext:
    """Holds the currently selected input of the audio device.

    Args:
        display: Where transition announcements are shown. Defaults to
            the terminal.
        initial: Input selected at power-on.
    """

    def __init__(
        self,
        display: DisplayOutput | None = None,
        initial: InputState = InputState.BLUETOOTH,
    ) -> None:
        self._display = display if display is not None else ConsoleDisplayOutput()
        self._state = initial

    @property
    def state(self) -> InputState:
        """Currently selected input."""
        return self._state

    def current_state(self) -> InputState:
        """Return the currently selected input (same as ``state``)."""
        return self._state

    def set_state(self, state: InputState) -> None:
        """Select ``state`` directly, without announcing it."""
        self._state = state

    def advance(self) -> None:
        """Switch to the next input and announce it."""
        previous = self._state
        self._state = successor(previous)
        logger.debug("Input changed: %s -> %s", previous.display_name, self._state.display_name)
        self._display.show_text(transition_message(self._state))

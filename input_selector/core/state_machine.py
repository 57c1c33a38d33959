"""Input selector state machine definitions.

Defines the selectable inputs and the fixed order the switch button
cycles through them.
"""

from __future__ import annotations

from enum import Enum


class InputState(Enum):
    """Inputs of the audio device.

    Transitions (one per press of the switch button):
        BLUETOOTH → OPTICAL
        OPTICAL → COAXIAL
        COAXIAL → RCA
        RCA → USB
        USB → BLUETOOTH
    """

    BLUETOOTH = "Bluetooth"
    OPTICAL = "Optical"
    COAXIAL = "Coaxial"
    RCA = "RCA"
    USB = "USB"

    @property
    def display_name(self) -> str:
        """Human-readable input name, as shown on the device."""
        return self.value

    @property
    def next(self) -> InputState:
        """The input selected after this one."""
        return _SUCCESSORS[self]

    @classmethod
    def from_name(cls, name: str) -> InputState:
        """Look up an input by display or member name, ignoring case.

        Args:
            name: Input name (e.g., "Optical", "rca", "USB").

        Returns:
            The matching InputState.

        Raises:
            ValueError: If no input has that name.
        """
        wanted = name.strip().lower()
        for state in cls:
            if wanted in (state.value.lower(), state.name.lower()):
                return state
        valid = ", ".join(state.value for state in cls)
        raise ValueError(f"Unknown input '{name}'. Valid inputs: {valid}")


_SUCCESSORS: dict[InputState, InputState] = {
    InputState.BLUETOOTH: InputState.OPTICAL,
    InputState.OPTICAL: InputState.COAXIAL,
    InputState.COAXIAL: InputState.RCA,
    InputState.RCA: InputState.USB,
    InputState.USB: InputState.BLUETOOTH,
}


def successor(state: InputState) -> InputState:
    """Return the input that follows ``state`` in the switch cycle."""
    return _SUCCESSORS[state]


def transition_message(state: InputState) -> str:
    """Announcement shown when switching to ``state``."""
    return f"Switching input to {state.display_name}..."

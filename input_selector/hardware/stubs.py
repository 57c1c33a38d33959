"""Desktop stub implementations for hardware interfaces.

These stubs stand in for the device's front panel:
- ConsoleDisplayOutput: prints to terminal
- RecordingDisplayOutput: keeps every line in memory
"""

from __future__ import annotations

from input_selector.hardware.interfaces import DisplayOutput


class ConsoleDisplayOutput(DisplayOutput):
    """Prints display content to the terminal.

    Also stores the last displayed text for testing.
    """

    def __init__(self) -> None:
        self.last_text: str = ""

    def show_text(self, text: str) -> None:
        """Display text on the panel (prints to terminal)."""
        self.last_text = text
        print(text)


class RecordingDisplayOutput(DisplayOutput):
    """Records displayed lines in memory instead of showing them."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def show_text(self, text: str) -> None:
        """Append text to the recorded lines."""
        self._lines.append(text)

    def get_recorded_lines(self) -> list[str]:
        """Return a copy of every line shown so far, oldest first."""
        return list(self._lines)

    def clear(self) -> None:
        """Forget all recorded lines."""
        self._lines = []

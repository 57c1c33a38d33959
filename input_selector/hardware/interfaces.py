"""Abstract hardware interfaces for the input selector.

The selector never prints or draws directly; every announcement goes
through a DisplayOutput so the front panel can be swapped for a terminal
or an in-memory recorder.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DisplayOutput(ABC):
    """Abstract front-panel display."""

    @abstractmethod
    def show_text(self, text: str) -> None:
        """Display a line of text on the panel.

        Args:
            text: Text content to display.
        """
        ...

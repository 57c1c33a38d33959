"""Command-line entry point: press the input switch a few times."""

from __future__ import annotations

import logging
import sys

from input_selector.core.config import load_settings
from input_selector.core.context import InputContext
from input_selector.hardware.stubs import ConsoleDisplayOutput

logger = logging.getLogger(__name__)


def main() -> int:
    """Cycle the selector from its power-on input, once per configured press."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    context = InputContext(ConsoleDisplayOutput(), initial=settings.initial_input)
    logger.info(
        "Input selector started on %s (%d presses).",
        context.state.display_name,
        settings.switch_presses,
    )
    for _ in range(settings.switch_presses):
        context.advance()
    logger.info("Input selector stopped on %s.", context.state.display_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

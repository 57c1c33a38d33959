"""End-to-end tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from input_selector import main as main_module
from input_selector.core.config import Settings
from input_selector.core.state_machine import InputState


def _make_settings(**overrides: object) -> Settings:
    """Create a Settings object with test defaults."""
    defaults = dict(
        initial_input=InputState.BLUETOOTH,
        switch_presses=5,
        log_level="WARNING",
    )
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def use_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[[Settings], None]:
    def _use(settings: Settings) -> None:
        monkeypatch.setattr(main_module, "load_settings", lambda: settings)

    return _use


class TestMain:
    def test_default_run_prints_full_cycle(
        self, use_settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        use_settings(_make_settings())

        assert main_module.main() == 0
        assert capsys.readouterr().out.splitlines() == [
            "Switching input to Optical...",
            "Switching input to Coaxial...",
            "Switching input to RCA...",
            "Switching input to USB...",
            "Switching input to Bluetooth...",
        ]

    def test_starts_from_configured_input(
        self, use_settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        use_settings(_make_settings(initial_input=InputState.RCA, switch_presses=2))

        main_module.main()
        assert capsys.readouterr().out.splitlines() == [
            "Switching input to USB...",
            "Switching input to Bluetooth...",
        ]

    def test_zero_presses_prints_nothing(
        self, use_settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        use_settings(_make_settings(switch_presses=0))

        assert main_module.main() == 0
        assert capsys.readouterr().out == ""

    def test_logging_stays_off_stdout(
        self, use_settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        use_settings(_make_settings(log_level="DEBUG"))

        main_module.main()
        out = capsys.readouterr().out
        assert len(out.splitlines()) == 5
        assert "Input changed" not in out

    def test_shipped_config_gives_default_run(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        for key in ["INITIAL_INPUT", "SWITCH_PRESSES", "LOG_LEVEL"]:
            monkeypatch.delenv(key, raising=False)
        real_load_settings = main_module.load_settings
        monkeypatch.setattr(
            main_module,
            "load_settings",
            lambda: real_load_settings(env_path=tmp_path / ".env"),
        )

        assert main_module.main() == 0
        assert len(capsys.readouterr().out.splitlines()) == 5

"""Tests for the application entry point."""

import pytest

from chessgrid import app
from chessgrid.config import AppSettings


def test_run_console_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def fake_run_console() -> int:
        calls.append("console")
        return 0

    monkeypatch.setattr("chessgrid.console.run_console", fake_run_console)
    assert app.run(AppSettings(interface="console")) == 0
    assert calls == ["console"]


def test_main_exits_with_front_end_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(app, "run", lambda settings: 3 if settings.use_console else 0)
    with pytest.raises(SystemExit) as excinfo:
        app.main(["--console", "--log-level", "info"])
    assert excinfo.value.code == 3

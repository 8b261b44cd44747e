from __future__ import annotations

import logging
from datetime import datetime

import pytest

import conkycal_app.cli as cli
from conkycal_core import config_from_args
from conkycal_renderer import ColorScheme, WeekStart, render_calendar

NOW = datetime(2024, 11, 16, 9, 0)


@pytest.fixture(autouse=True)
def _fixed_run(monkeypatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_kw: logging.getLogger("conky_calendar"))
    monkeypatch.setattr(cli, "config_from_args", lambda args: config_from_args(args, now=NOW, environ={}))


def test_main_prints_plain_calendar(capsys) -> None:
    rc = cli.main([])
    assert rc == 0
    out = capsys.readouterr().out
    assert out == render_calendar(NOW.date(), WeekStart.SUNDAY)
    assert "${color" not in out


def test_main_applies_colors(capsys) -> None:
    rc = cli.main(["-t", "FF0000", "-w", "00FF00", "-m"])
    assert rc == 0
    out = capsys.readouterr().out
    assert out == render_calendar(NOW.date(), WeekStart.MONDAY, ColorScheme(today="FF0000", weekend="00FF00"))
    assert "${color #FF0000}16 ${color}" in out


def test_main_writes_preview(tmp_path, capsys) -> None:
    pytest.importorskip("PIL")
    target = tmp_path / "cal.png"
    rc = cli.main(["-d", "CCCCCC", "--preview", str(target)])
    assert rc == 0
    assert target.exists()
    assert capsys.readouterr().out.endswith("\n")


def test_main_reports_preview_failure(tmp_path, capsys) -> None:
    pytest.importorskip("PIL")
    rc = cli.main(["--preview", str(tmp_path)])
    assert rc == 1
    assert capsys.readouterr().out == render_calendar(NOW.date(), WeekStart.SUNDAY)


def test_main_prints_when_log_dir_is_unwritable(tmp_path, monkeypatch, capsys) -> None:
    import sys

    import conkycal_app.__main__ as entry
    from conkycal_core import logging_setup

    not_a_dir = tmp_path / "home_is_a_file"
    not_a_dir.write_text("", encoding="utf-8")
    logger = logging_setup.get_logger()
    saved_handlers = list(logger.handlers)
    for handler in saved_handlers:
        logger.removeHandler(handler)

    monkeypatch.setattr(logging_setup, "_config_root", lambda: not_a_dir)
    monkeypatch.setattr(logging_setup, "_crash_hooks_installed", False)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    monkeypatch.setattr(cli, "configure_logging", logging_setup.configure_logging)
    try:
        rc = entry.main(["-t", "FF0000"])
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            logger.addHandler(handler)

    assert rc == 0
    out = capsys.readouterr().out
    expected = render_calendar(NOW.date(), WeekStart.SUNDAY, ColorScheme(today="FF0000"))
    assert out == expected

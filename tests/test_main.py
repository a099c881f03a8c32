import logging

import main


def test_known_log_level_is_used():
    assert main.configure_logging("debug") == logging.DEBUG
    assert main.configure_logging("WARNING") == logging.WARNING


def test_unknown_log_level_falls_back_to_info(caplog):
    with caplog.at_level(logging.WARNING, logger="gridsnake"):
        assert main.configure_logging("verbose") == logging.INFO
    assert "Unknown GRIDSNAKE_LOG_LEVEL 'verbose'" in caplog.text


def test_main_reports_failed_start_up(monkeypatch, caplog):
    def no_window():
        raise main.SurfaceUnavailableError("no video device")

    monkeypatch.setattr(main, "LOG_LEVEL", "nonsense")
    monkeypatch.setattr(main, "GameController", no_window)
    with caplog.at_level(logging.ERROR, logger="gridsnake"):
        assert main.main() == 1
    assert "Start-up aborted" in caplog.text

import logging

from library_catalogue.app.core import config
from library_catalogue.app.core.logging_config import setup_logging


def test_setup_logging_adds_console_and_file_handlers(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "catalogue.log"

    setup_logging("debug", str(logfile))

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    file_handlers = [h for h in root.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1

    logging.getLogger("library_catalogue.test").info("Lent book %s", 1)
    file_handlers[0].flush()
    file_handlers[0].close()
    assert "[INFO] library_catalogue.test: Lent book 1" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    setup_logging("DEBUG")

    assert root.handlers == [existing]


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO


def test_env_flag(monkeypatch):
    monkeypatch.setenv("LOAD_SAMPLE_DATA", "Yes")
    assert config._env_flag("LOAD_SAMPLE_DATA", "false") is True
    monkeypatch.setenv("LOAD_SAMPLE_DATA", "0")
    assert config._env_flag("LOAD_SAMPLE_DATA", "true") is False
    monkeypatch.delenv("LOAD_SAMPLE_DATA")
    assert config._env_flag("LOAD_SAMPLE_DATA", "true") is True


def test_default_settings():
    settings = config.Settings()
    assert settings.project_name
    assert isinstance(settings.port, int)
    assert isinstance(settings.load_sample_data, bool)

import importlib
import logging

from admissions.config import settings


def _reload_logger(monkeypatch, level):
    monkeypatch.setattr(settings, "log_level", level)
    import admissions.logger as package_logger
    return importlib.reload(package_logger)


def test_known_level_override(monkeypatch):
    module = _reload_logger(monkeypatch, "warning")
    assert module.LOG_LEVEL == logging.WARNING
    assert module.logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(monkeypatch):
    module = _reload_logger(monkeypatch, "VERBOSE")
    assert module.LOG_LEVEL == logging.INFO
    assert module.logger.level == logging.INFO


def test_environment_default(monkeypatch):
    monkeypatch.setattr(settings, "environment", "dev")
    module = _reload_logger(monkeypatch, None)
    assert module.LOG_LEVEL == logging.DEBUG

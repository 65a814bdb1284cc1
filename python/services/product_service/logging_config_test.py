import logging

from product_service.logging_config import setup_logging


def test_setup_logging_is_noop_when_configured(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    setup_logging("DEBUG")
    assert root.handlers == [existing]


def test_setup_logging_adds_console_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", logging.WARNING)
    setup_logging("debug")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)

import logging
import os
from contextlib import contextmanager
from pathlib import Path

import pytest
from pydantic import ValidationError

from localekit.core.config import Settings
from localekit.core.logging_config import LOGGING_CONFIG, ColoredFormatter, setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOCALEKIT_DEFAULT_LOCALE", raising=False)
    monkeypatch.delenv("LOCALEKIT_RESOURCE_DIRS", raising=False)
    s = Settings(_env_file=None)
    assert s.DEFAULT_LOCALE == "en"
    assert s.RESOURCE_DIRS == []
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOCALEKIT_DEFAULT_LOCALE", "fr_CA")
    monkeypatch.setenv("LOCALEKIT_RESOURCE_DIRS", "/opt/locales, ./extra")
    s = Settings(_env_file=None)
    assert s.DEFAULT_LOCALE == "fr_CA"
    assert s.RESOURCE_DIRS == [Path("/opt/locales"), Path("./extra")]


def test_blank_default_locale_rejected(monkeypatch):
    monkeypatch.setenv("LOCALEKIT_DEFAULT_LOCALE", "  ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@contextmanager
def preserved_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    levels = {name: logging.getLogger(name).level for name in LOGGING_CONFIG}
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        for name, lvl in levels.items():
            logging.getLogger(name).setLevel(lvl)


def test_setup_logging():
    with preserved_logging() as root:
        setup_logging(level="warning")
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("localekit.core.resources").level == logging.WARNING


def test_setup_logging_debug():
    with preserved_logging() as root:
        setup_logging(debug=True)
        assert root.level == logging.DEBUG
        assert logging.getLogger("localekit").level == logging.DEBUG


def test_colored_formatter_leaves_record_untouched():
    formatter = ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("localekit", logging.WARNING, __file__, 1, "careful", None, None)
    assert formatter.format(record) == "\033[33mWARNING\033[0m careful"
    assert record.levelname == "WARNING"


def test_env_file_read_without_touching_environ(tmp_path, monkeypatch):
    monkeypatch.delenv("LOCALEKIT_DEFAULT_LOCALE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LOCALEKIT_DEFAULT_LOCALE=de\n", encoding="utf-8")
    s = Settings(_env_file=env_file)
    assert s.DEFAULT_LOCALE == "de"
    assert "LOCALEKIT_DEFAULT_LOCALE" not in os.environ

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

import pytest

from mtg_card_stats_ui.utils.logging_config import get_log_level, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def make_config(tmp_path, level="WARNING", to_file=True, to_console=True):
    config = MagicMock()
    config.get.return_value = level
    config.get_bool.side_effect = lambda section, key, fallback=False: {
        "log_to_file": to_file,
        "log_to_console": to_console,
    }[key]
    config.get_path.return_value = tmp_path / "logs"
    return config


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("INFO", logging.INFO),
    ("Warning", logging.WARNING),
    ("bogus", logging.INFO),
])
def test_get_log_level(name, expected):
    assert get_log_level(name) == expected


def test_setup_logging_from_config(tmp_path, restore_root_logger):
    root = setup_logging(make_config(tmp_path))

    assert root.level == logging.WARNING
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert (tmp_path / "logs").is_dir()
    assert logging.getLogger("matplotlib").level == logging.WARNING


def test_setup_logging_console_only(tmp_path, restore_root_logger):
    root = setup_logging(make_config(tmp_path, to_file=False))

    assert len(root.handlers) == 1
    assert not any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert not (tmp_path / "logs").exists()


def test_setup_logging_debug_overrides_level(tmp_path, restore_root_logger):
    root = setup_logging(make_config(tmp_path, level="ERROR", to_file=False), debug=True)
    assert root.level == logging.DEBUG


def test_setup_logging_replaces_handlers(tmp_path, restore_root_logger):
    config = make_config(tmp_path, to_file=False)
    setup_logging(config)
    root = setup_logging(config)
    assert len(root.handlers) == 1

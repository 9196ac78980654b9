"""Tests for pr2jira.log."""

import logging

import pytest
from rich.logging import RichHandler

from pr2jira.log import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_installs_single_rich_handler() -> None:
    configure_logging("debug")
    configure_logging("debug")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)
    assert root.level == logging.DEBUG


def test_quiets_httpx() -> None:
    configure_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING


def test_error_level_applies_to_httpx() -> None:
    configure_logging("ERROR")
    assert logging.getLogger("httpx").level == logging.ERROR


@pytest.mark.parametrize("level", ["verbose", "", "trace"])
def test_unknown_level_falls_back_to_info(level: str) -> None:
    configure_logging(level)
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

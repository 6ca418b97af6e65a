"""Shared pytest fixtures and configuration for the tyg_template test suite.

Guidelines
----------
* Every test starts with the disclose switch off and unloaded.
* Package logging is reset after each test so handlers never leak.
* Filesystem access only through ``tmp_path``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest

from tyg_template.cli.logging_setup import ROOT_LOGGER_NAME
from tyg_template.config import DISCLOSE_ENV_VAR, get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(DISCLOSE_ENV_VAR, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def set_disclose(monkeypatch: pytest.MonkeyPatch) -> Callable[[bool], None]:
    """Return a setter that fixes the disclose switch for this test."""

    def _set(enabled: bool) -> None:
        monkeypatch.setenv(DISCLOSE_ENV_VAR, "1" if enabled else "0")
        get_settings.cache_clear()

    return _set

"""Shared pytest fixtures for pathslash tests."""

from collections.abc import Iterator

import pytest
from loguru import logger

import pathslash.converter
from pathslash.converter import SlashConverter
from pathslash.flavours import POSIX, WINDOWS


@pytest.fixture
def posix() -> SlashConverter:
    """Converter for slash-native paths with UTF-8 byte paths."""
    return SlashConverter(flavour=POSIX, encoding="utf-8")


@pytest.fixture
def windows() -> SlashConverter:
    """Converter for backslash-native paths with UTF-8 byte paths."""
    return SlashConverter(flavour=WINDOWS, encoding="utf-8")


@pytest.fixture
def reset_default_converter(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Restore the module-level default converter after the test."""
    monkeypatch.setattr(pathslash.converter, "_default_converter", None)
    pathslash.converter._converter_for.cache_clear()
    yield
    pathslash.converter._converter_for.cache_clear()


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect pathslash log messages emitted during the test."""
    messages: list[str] = []
    logger.enable("pathslash")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("pathslash")

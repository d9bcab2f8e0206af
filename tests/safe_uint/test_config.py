"""Tests for the environment configuration."""

import importlib
from collections.abc import Iterator

import pytest

import safe_uint.config as config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Yield the monkeypatch and restore the configuration module afterwards."""
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


@pytest.mark.parametrize("bits", ["8", "64", "256"])
def test_supported_widths(reload_config: pytest.MonkeyPatch, bits: str) -> None:
    """Every supported width is accepted."""
    reload_config.setenv("SAFE_UINT_BITS", bits)
    importlib.reload(config)
    assert config.SAFE_UINT_BITS == int(bits)


def test_default_width(reload_config: pytest.MonkeyPatch) -> None:
    """Without the variable the width is 128 bits."""
    reload_config.delenv("SAFE_UINT_BITS", raising=False)
    importlib.reload(config)
    assert config.SAFE_UINT_BITS == 128


@pytest.mark.parametrize("bits", ["12", "0", "abc", "-64", ""])
def test_invalid_width(reload_config: pytest.MonkeyPatch, bits: str) -> None:
    """Anything else is rejected at import."""
    reload_config.setenv("SAFE_UINT_BITS", bits)
    with pytest.raises(ValueError, match="Invalid SAFE_UINT_BITS"):
        importlib.reload(config)

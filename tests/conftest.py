"""Shared pytest fixtures and configuration."""

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from pathlib import Path

import pytest

from toolbelt.config import Settings, settings
from toolbelt.utils.logging import clear_correlation_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_correlation_context()
    yield
    clear_correlation_context()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        APP_HOME=tmp_path / "home",
    )


@pytest.fixture
def debug_assertions(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make assertion failures raise, as in a debug build."""
    monkeypatch.setattr(settings, "DEBUG_ASSERTIONS", True)


@pytest.fixture
def release_assertions(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make assertion failures only log, as in a release build."""
    monkeypatch.setattr(settings, "DEBUG_ASSERTIONS", False)


@pytest.fixture
def app_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the well-known directories at a temporary home."""
    home = tmp_path / "home"
    monkeypatch.setattr(settings, "APP_HOME", home)
    return home


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


async def _drain(iterations: int = 10) -> None:
    for _ in range(iterations):
        await asyncio.sleep(0)


@pytest.fixture
def drain() -> Callable[..., Awaitable[None]]:
    """Coroutine that lets callbacks scheduled on the running loop execute."""
    return _drain

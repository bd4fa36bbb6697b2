import logging
from collections.abc import Iterator

import pytest

from avatarlink.config import config
from avatarlink.generator import DEFAULT_BASE_URL, Generator


@pytest.fixture
def generator() -> Generator:
    return Generator()


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset configured defaults so local .env files do not leak into tests."""
    monkeypatch.setattr(config, "BASE_URL", DEFAULT_BASE_URL)
    monkeypatch.setattr(config, "FILE_EXTENSION", "")
    monkeypatch.setattr(config, "DEFAULT_IMAGE", None)
    monkeypatch.setattr(config, "RATING", None)
    monkeypatch.setattr(config, "SIZE", None)
    monkeypatch.setattr(config, "DEBUG", False)


@pytest.fixture
def app_logger() -> Iterator[logging.Logger]:
    """Restore the avatarlink logger after configure_logging has touched it."""
    logger = logging.getLogger("avatarlink")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate

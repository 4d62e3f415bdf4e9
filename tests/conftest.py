"""
Pytest configuration and shared fixtures for sysx tests.
"""

import logging
import logging.handlers
import random
from typing import Generator

import pytest

from sysx.core import config as config_module
from sysx.io.env import EnvCache


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """Run each test against fresh configuration, away from any local .env file."""
    monkeypatch.chdir(tmp_path)
    config_module._config = None
    yield
    config_module._config = None


@pytest.fixture(autouse=True)
def reset_sysx_logger() -> Generator[None, None, None]:
    """Undo handlers installed by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger("sysx")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.handlers.RotatingFileHandler):
            root.removeHandler(handler)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a deterministic random generator."""
    return random.Random(1234)


@pytest.fixture
def env_cache() -> EnvCache:
    """Provide a cache isolated from the process environment."""
    return EnvCache({"HOME": "/home/test", "SHELL": "/bin/sh"}, export=False)

from __future__ import annotations

from collections.abc import Generator

import pytest
from loguru import logger


@pytest.fixture
def log_messages() -> Generator[list[str]]:
    """Collect command_runner log lines as `LEVEL message` strings."""
    messages: list[str] = []
    logger.enable("command_runner")
    handler_id = logger.add(
        lambda msg: messages.append(msg.rstrip("\n")),
        format="{level} {message}",
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
    logger.disable("command_runner")

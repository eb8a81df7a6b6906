# tests/test_logging.py
import io
import logging

import pytest

from solid_principles.logging.logger import configure_logging, get_logger, resolve_level

pytestmark = pytest.mark.tier1


def test_configure_logging_is_idempotent():
    stream = io.StringIO()
    configure_logging("INFO", stream=stream)
    configure_logging("DEBUG", stream=stream)

    root = logging.getLogger("solid_principles")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG


def test_messages_reach_configured_stream():
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)

    get_logger("solid_principles.runtime.runner").info("hello")

    assert "[INFO] solid_principles.runtime.runner: hello" in stream.getvalue()


@pytest.mark.parametrize("value, expected", [("debug", 10), ("WARNING", 30), (20, 20)])
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_resolve_level_rejects_unknown():
    with pytest.raises(ValueError):
        resolve_level("LOUD")

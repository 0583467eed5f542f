import io
import json
import logging

import pytest

from _01_simulator.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_text_lines_carry_level_and_name(restore_root_logger):
    stream = io.StringIO()
    setup_logging("debug", stream=stream)

    get_logger("tests.match").debug("Game %d finished", 3)

    line = stream.getvalue().strip()
    assert "[DEBUG] tests.match: Game 3 finished" in line


def test_json_lines_parse(restore_root_logger):
    stream = io.StringIO()
    setup_logging("INFO", format_json=True, stream=stream)

    get_logger("tests.match").info("X wins")
    get_logger("tests.match").debug("hidden")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["level"] == "INFO"
    assert record["message"] == "X wins"


def test_repeated_setup_replaces_handler(restore_root_logger):
    first, second = io.StringIO(), io.StringIO()
    setup_logging(logging.INFO, stream=first)
    setup_logging(logging.INFO, stream=second)

    get_logger("tests.match").info("once")

    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1

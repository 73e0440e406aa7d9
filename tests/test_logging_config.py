"""Test unified logging configuration.

Tests for tileimg.utils.logging_config:
    - Human and JSON line formats include contextual fields
    - push_context / pop_context
    - setup_logging is idempotent and never touches foreign handlers
    - Unknown level names are rejected

Run:
    pytest tests/test_logging_config.py -v
"""

import json
import logging

import pytest

from tileimg.utils import logging_config
from tileimg.utils.logging_config import (
    ContextFormatter,
    pop_context,
    push_context,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_context():
    pop_context()
    yield
    pop_context()


def _record(msg="hello %s", args=("world",), level=logging.INFO):
    return logging.LogRecord("tileimg.test", level, __file__, 1, msg, args, None)


def test_human_format_with_context():
    push_context(app="tileimg", run=3)
    line = ContextFormatter("human", use_color=False).format(_record())
    assert "| INFO " in line
    assert "app=tileimg run=3 |" in line
    assert line.endswith("hello world")


def test_human_format_without_context():
    line = ContextFormatter("human", use_color=False).format(_record())
    assert line.endswith("| hello world")
    assert "=" not in line


def test_json_format():
    push_context(app="tileimg")
    payload = json.loads(ContextFormatter("json").format(_record(level=logging.WARNING)))
    assert payload["lvl"] == "WARNING"
    assert payload["msg"] == "hello world"
    assert payload["app"] == "tileimg"
    assert payload["name"] == "tileimg.test"


def test_unknown_format_mode():
    with pytest.raises(ValueError):
        ContextFormatter("xml")


def test_pop_context_keys():
    push_context(app="tileimg", spec="0,0")
    pop_context(keys=["spec"])
    line = ContextFormatter("human", use_color=False).format(_record())
    assert "app=tileimg" in line
    assert "spec=" not in line


def test_setup_logging_idempotent():
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        first = setup_logging("DEBUG")
        second = setup_logging("WARNING")
        assert len(first) == 1 and len(second) == 1
        assert first[0] not in root.handlers
        assert second[0] in root.handlers
        assert foreign in root.handlers
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(foreign)
        for handler in logging_config._handlers:
            root.removeHandler(handler)


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "logs" / "tileimg.log"
    try:
        setup_logging("INFO", str(log_file), json=True, to_stderr=False,
                      context={"app": "tileimg"})
        logging.getLogger("tileimg.test").info("written")
        for handler in logging_config._handlers:
            handler.flush()
        payload = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert payload["msg"] == "written"
        assert payload["app"] == "tileimg"
    finally:
        root = logging.getLogger()
        for handler in logging_config._handlers:
            root.removeHandler(handler)
            handler.close()


def test_setup_logging_bad_level():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("LOUD")

# ============================================================================
# LOGGING & CONFIG TESTS
# ============================================================================
# STATUS: Tests - Structured logging and defaults
# PURPOSE: Verify context propagation, formatters and env overrides
# ============================================================================
"""
Logging & Config Tests

Run with:
    pytest tests/test_logging_config.py -v
"""

import json
import logging

import pytest

from core.config import get_defaults, reset_defaults
from core.logging import (
    ComponentType,
    HumanFormatter,
    StructuredFormatter,
    configure_logging,
    get_current_context,
    get_logger,
    log_context,
)


@pytest.fixture(autouse=True)
def fresh_defaults():
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def _record(msg="Parsed key", extra=None):
    record = logging.LogRecord("codec.test", logging.WARNING, __file__, 1, msg, None, None)
    if extra is not None:
        record.extra = extra
    return record


# ============================================================================
# CONTEXT
# ============================================================================


class TestLogContext:
    def test_nesting(self):
        with log_context(rsc_id="db"):
            with log_context(op_key="db_start_0"):
                ctx = get_current_context()
                assert ctx.rsc_id == "db"
                assert ctx.op_key == "db_start_0"
            assert get_current_context().op_key is None
        assert get_current_context().rsc_id is None

    def test_to_dict_skips_none(self):
        with log_context(node="node1", extra={"attempt": 2}):
            assert get_current_context().to_dict() == {"node": "node1", "attempt": 2}


# ============================================================================
# FORMATTERS
# ============================================================================


class TestFormatters:
    def test_structured(self):
        with log_context(op_key="db_start_0"):
            line = StructuredFormatter().format(_record(extra={"interval_ms": 0}))
        data = json.loads(line)
        assert data["level"] == "WARNING"
        assert data["message"] == "Parsed key"
        assert data["context"] == {"op_key": "db_start_0"}
        assert data["data"] == {"interval_ms": 0}
        assert data["timestamp"].endswith("Z")

    def test_human(self):
        with log_context(rsc_id="db", transition_key="1:2:0:n"):
            line = HumanFormatter().format(_record())
        assert "[rsc=db, transition=1:2:0:n]" in line
        assert line.endswith("codec.test [rsc=db, transition=1:2:0:n]: Parsed key")


class TestGetLogger:
    def test_component_in_extra(self, caplog):
        logger = get_logger("codec.test", ComponentType.CODEC)
        with caplog.at_level(logging.INFO):
            logger.info("hello")
        assert caplog.records[-1].extra["component"] == "codec"

    def test_context_in_extra(self, caplog):
        logger = get_logger("codec.test")
        with caplog.at_level(logging.INFO), log_context(rsc_id="db"):
            logger.info("hello", extra={"n": 1})
        assert caplog.records[-1].extra == {"n": 1, "rsc_id": "db"}


class TestConfigureLogging:
    def test_json_from_env(self, monkeypatch, restore_root_logger):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        reset_defaults()
        configure_logging()
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)

    def test_explicit_arguments(self, restore_root_logger):
        configure_logging(level="ERROR", json_output=False)
        root = restore_root_logger
        assert root.level == logging.ERROR
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, HumanFormatter)


# ============================================================================
# DEFAULTS
# ============================================================================


class TestDefaults:
    def test_wire_constants(self):
        wire = get_defaults().wire
        assert wire.node_field_width == 36
        assert wire.interval_mask == 0xFFFFFFFF
        assert wire.meta_prefix == "CRM_meta"

    def test_singleton(self):
        assert get_defaults() is get_defaults()

    def test_env_overrides_logging(self, monkeypatch):
        monkeypatch.setenv("CODEC_WARN_UUID_LENGTH", "0")
        reset_defaults()
        assert get_defaults().logging.warn_uuid_length is False

    def test_version_exported(self):
        import core
        assert core.__version__.count(".") == 3

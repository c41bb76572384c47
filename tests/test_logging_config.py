import json
import logging

import pytest
import structlog

from usdt0_bridge.logging_config import bridge_context, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_json_logs_at_info(restore_logging, capsys):
    setup_logging("INFO")

    logging.getLogger("usdt0_bridge.test").info("Bridge transaction submitted: %s", "0xabc")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Bridge transaction submitted: 0xabc"
    assert record["level"] == "info"
    assert record["logger"] == "usdt0_bridge.test"


def test_debug_level_and_quiet_http(restore_logging):
    setup_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_bridge_context_is_attached_to_stdlib_records(restore_logging, capsys):
    setup_logging("INFO")

    with bridge_context(operation="bridge", target_chain="arbitrum"):
        logging.getLogger("usdt0_bridge.test").warning("Bridge fee exceeds maximum")
    logging.getLogger("usdt0_bridge.test").warning("outside")

    inside, outside = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()[-2:]]
    assert inside["operation"] == "bridge"
    assert inside["target_chain"] == "arbitrum"
    assert "operation" not in outside

import logging

import pytest
import structlog

from alert_webhook.core.logging_config import configure_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_installs_json_handler(restore_logging):
    configure_logging("debug")

    assert restore_logging.level == logging.DEBUG
    assert len(restore_logging.handlers) == 1
    assert isinstance(restore_logging.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_configure_logging_renders_json(restore_logging, capsys):
    configure_logging("info")

    structlog.get_logger("test").info("webhook_sent", channel="discord")

    err = capsys.readouterr().err
    assert '"event": "webhook_sent"' in err
    assert '"channel": "discord"' in err

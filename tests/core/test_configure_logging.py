# tests/core/test_configure_logging.py
import logging

import pytest

from semantic_auditor.utils.configure_logging import LogWithTqdm, configure_logger


@pytest.fixture
def restore_logging():
    """Herstel de root logger na de test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("bs4").setLevel(logging.NOTSET)
    logging.getLogger("semantic_auditor.dom").setLevel(logging.NOTSET)


def test_configure_logger_installs_tqdm_handler(restore_logging):
    handler = configure_logger(
        "warning",
        module_specific_levels={"semantic_auditor.dom": "DEBUG"},
        silenced_loggers={"bs4": "ERROR"},
    )
    root = logging.getLogger()

    assert root.handlers == [handler]
    assert isinstance(handler, LogWithTqdm)
    assert root.level == logging.WARNING
    assert logging.getLogger("semantic_auditor.dom").level == logging.DEBUG
    assert logging.getLogger("bs4").level == logging.ERROR


def test_handler_writes_through_tqdm(restore_logging, capsys):
    configure_logger("INFO")
    logging.getLogger("semantic_auditor.test").info("hello from the auditor")
    assert "hello from the auditor" in capsys.readouterr().err

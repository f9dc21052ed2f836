import logging

import pytest

from employee_admin.infra.logging.setup import closeCommandLogger, createCommandLogger, logEvent, mapLogLevel


def test_map_log_level():
    assert mapLogLevel("warn") == logging.WARNING
    assert mapLogLevel(" DEBUG ") == logging.DEBUG
    with pytest.raises(ValueError):
        mapLogLevel("TRACE")


def test_command_logger_writes_run_id_and_component(tmp_path):
    logger, log_file = createCommandLogger("validate", str(tmp_path), "run-9", "INFO")

    logEvent(logger, logging.INFO, "run-9", "store", "opened")
    logger.warning("no extras")
    logger.debug("hidden")
    closeCommandLogger(logger)

    text = (tmp_path / "validate_run-9.log").read_text(encoding="utf-8")
    assert log_file.endswith("validate_run-9.log")
    assert "runId=run-9 comp=store msg=opened" in text
    assert "comp=core msg=no extras" in text
    assert "hidden" not in text

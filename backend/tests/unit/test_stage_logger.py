"""Unit tests for the handler StageLogger."""

import logging

import pytest

from salonflow.infrastructure.logging.stage_logger import HandlerStage, StageLogger


def test_trace_lines_are_skipped_above_info(caplog):
    log = StageLogger("StageLoggerTest.quiet", use_color=False)

    with caplog.at_level(logging.WARNING, logger="StageLoggerTest.quiet"):
        log.step_start(HandlerStage.VALIDATE, "services.create")
        log.step_error(HandlerStage.EXECUTE, "services.create", RuntimeError("boom"))

    assert [r.levelno for r in caplog.records] == [logging.ERROR]
    assert "RuntimeError: boom" in caplog.text


def test_plain_output_has_no_escape_codes(caplog):
    log = StageLogger("StageLoggerTest.plain", use_color=False)

    with caplog.at_level(logging.INFO, logger="StageLoggerTest.plain"):
        log.step_complete(HandlerStage.COMPLETE, "services.list", outcome="succeeded")

    assert caplog.records[0].getMessage() == "✅ [COMPLETE] services.list ✓ (outcome=succeeded)"


def test_timed_step_logs_failure_and_reraises(caplog):
    log = StageLogger("StageLoggerTest.timed", use_color=False)

    with caplog.at_level(logging.INFO, logger="StageLoggerTest.timed"):
        with pytest.raises(ValueError):
            with log.timed_step(HandlerStage.EXECUTE, "services.update"):
                raise ValueError("bad")

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0].startswith("💾 [EXECUTE] services.update")
    assert "failed after" in messages[-1]

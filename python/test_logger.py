#!/usr/bin/env python3
"""ロガーのテスト"""
import logging

import pytest

from s3_tasks.models.config import LoggingConfig
from s3_tasks.utils.logger import LoggerManager


def test_logger_writes_to_file(tmp_path):
    LoggerManager.reset()
    log_file = tmp_path / "logs" / "s3_tasks.log"
    logger = LoggerManager.setup(LoggingConfig(level="info", file=str(log_file)))

    logger.info("Uploaded 2 objects to the bucket 'bucket'.")
    logger.debug("not written at INFO")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO - Uploaded 2 objects to the bucket 'bucket'." in content
    assert "not written" not in content
    assert logger.level == logging.INFO


def test_setup_is_done_once():
    first = LoggerManager.get_logger()
    assert LoggerManager.setup(LoggingConfig(level="ERROR")) is first
    assert first.level == logging.DEBUG


def test_get_logger_requires_setup():
    LoggerManager.reset()
    with pytest.raises(RuntimeError):
        LoggerManager.get_logger()


def test_unknown_level_falls_back_to_info():
    LoggerManager.reset()
    logger = LoggerManager.setup(LoggingConfig(level="chatty"))
    assert logger.level == logging.INFO

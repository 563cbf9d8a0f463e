"""pytest 共通フィクスチャ"""
import logging

import pytest

from s3_tasks.models.config import LoggingConfig
from s3_tasks.utils.logger import LoggerManager, LOGGER_NAME


@pytest.fixture(autouse=True)
def logger(caplog):
    """テストごとにDEBUGレベルのロガーを用意"""
    LoggerManager.reset()
    configured = LoggerManager.setup(LoggingConfig(level="DEBUG"))
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
    yield configured
    LoggerManager.reset()


@pytest.fixture(autouse=True)
def aws_env(monkeypatch, tmp_path):
    """実環境の認証情報を読まないようにする"""
    for name in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN",
                 "AWS_DEFAULT_REGION", "AWS_REGION",
                 "AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_WEB_IDENTITY_TOKEN_FILE",
                 "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
                 "AWS_CONTAINER_CREDENTIALS_FULL_URI"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "no-credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "no-config"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")

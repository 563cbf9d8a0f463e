"""s3_tasks ロガー"""
import logging
import os
from typing import List, Optional
from ..models.config import LoggingConfig


LOGGER_NAME = "s3_tasks"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    """ログレベル名を数値に変換（不明な名前はINFO）"""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _handlers(config: LoggingConfig) -> List[logging.Handler]:
    """コンソール（stderr）と、設定があればログファイル"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.file:
        log_dir = os.path.dirname(config.file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

    formatter = logging.Formatter(config.format, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


class LoggerManager:
    """タスク実行で共有するロガー（プロセスで1回だけ設定）"""

    _logger: Optional[logging.Logger] = None

    @classmethod
    def setup(cls, config: LoggingConfig) -> logging.Logger:
        if cls._logger is None:
            logger = logging.getLogger(LOGGER_NAME)
            logger.setLevel(_level(config.level))
            logger.handlers = _handlers(config)
            cls._logger = logger
        return cls._logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        if cls._logger is None:
            raise RuntimeError("Logger not initialized. Call setup() first.")
        return cls._logger

    @classmethod
    def reset(cls):
        """ハンドラーを閉じて未設定の状態に戻す"""
        if cls._logger is not None:
            for handler in cls._logger.handlers:
                handler.close()
            cls._logger.handlers = []
            cls._logger = None

"""設定モデル"""
from .config import (
    Config,
    LoggingConfig,
    AWSConfig,
    ProxyConfig,
    TransferOptions,
    Credential,
    TaskSettings,
)

__all__ = [
    'Config',
    'LoggingConfig',
    'AWSConfig',
    'ProxyConfig',
    'TransferOptions',
    'Credential',
    'TaskSettings',
]

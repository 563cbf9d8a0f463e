"""S3 Tasks コアモジュール"""
from .bucket import extract_bucket, extract_region
from .credentials import CredentialResolver, ResolvedCredentials, find_for_host
from .s3_client import S3ClientManager
from .task_runner import TaskRunner

__all__ = [
    'extract_bucket',
    'extract_region',
    'CredentialResolver',
    'ResolvedCredentials',
    'find_for_host',
    'S3ClientManager',
    'TaskRunner'
]

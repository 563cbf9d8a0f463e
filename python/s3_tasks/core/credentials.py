"""認証情報の解決"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import boto3
from botocore.exceptions import BotoCoreError

from ..errors import NoCredentialProviderError
from ..models.config import Credential
from ..utils.logger import LoggerManager


class CredentialSource(Enum):
    CONFIGURED = "configured"
    PROVIDER_CHAIN = "provider chain"


@dataclass
class ResolvedCredentials:
    """クライアント作成に使う認証情報"""
    access_key_id: str
    secret_access_key: str
    session_token: Optional[str]
    source: CredentialSource
    profile: Optional[str] = None  # プロバイダーチェーンで使ったプロファイル

    def client_kwargs(self) -> dict:
        kwargs = {
            'aws_access_key_id': self.access_key_id,
            'aws_secret_access_key': self.secret_access_key,
        }
        if self.session_token:
            kwargs['aws_session_token'] = self.session_token
        return kwargs


def find_for_host(credentials: List[Credential], host: str) -> Optional[Credential]:
    """ホスト名が完全一致する最初の認証情報を返す（大文字小文字を区別）"""
    for credential in credentials:
        if credential.host == host:
            return credential
    return None


class CredentialResolver:
    """設定済みの認証情報 → boto3のデフォルトプロバイダーチェーンの順に解決"""

    def __init__(self, credentials: List[Credential], profile: Optional[str] = None):
        self.credentials = credentials
        self.profile = profile
        self.logger = LoggerManager.get_logger()

    def resolve(self, host: str) -> ResolvedCredentials:
        credential = find_for_host(self.credentials, host)
        if credential is not None:
            self.logger.debug(f"Using configured credentials for host: {host}")
            return ResolvedCredentials(
                access_key_id=credential.user,
                secret_access_key=credential.password,
                session_token=None,
                source=CredentialSource.CONFIGURED,
            )

        # 環境変数、共有認証情報ファイル、インスタンスメタデータ等
        try:
            session = boto3.Session(profile_name=self.profile)
            provided = session.get_credentials()
            if provided is None:
                raise NoCredentialProviderError(host)
            frozen = provided.get_frozen_credentials()
        except BotoCoreError as e:
            self.logger.error(f"Credential provider chain failed: {e}")
            raise NoCredentialProviderError(host) from e

        self.logger.debug(
            f"Using credentials from provider chain ({provided.method}) for host: {host}"
        )
        return ResolvedCredentials(
            access_key_id=frozen.access_key,
            secret_access_key=frozen.secret_key,
            session_token=frozen.token,
            source=CredentialSource.PROVIDER_CHAIN,
            profile=self.profile,
        )

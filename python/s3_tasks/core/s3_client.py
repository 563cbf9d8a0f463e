"""S3クライアント管理"""
import boto3
from botocore.config import Config as BotoCoreConfig
from typing import List, Optional
from ..models.config import AWSConfig, Credential, ProxyConfig
from ..utils.logger import LoggerManager
from .bucket import extract_region
from .credentials import CredentialResolver


class S3ClientManager:
    """タスク実行ごとのS3クライアントの作成"""
    
    def __init__(self, aws_config: AWSConfig, credentials: List[Credential],
                 host: str, proxy: Optional[ProxyConfig] = None):
        self.aws_config = aws_config
        self.credentials = credentials
        self.host = host
        self.proxy = proxy
        self.logger = LoggerManager.get_logger()
        self._client = None
        
    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _client_config(self) -> BotoCoreConfig:
        """HTTPS固定、プロキシ設定があれば反映"""
        options = {}
        if self.proxy is not None:
            options['proxies'] = self.proxy.to_proxies()
        return BotoCoreConfig(**options)
        
    def _create_client(self):
        """S3クライアントを作成"""
        resolver = CredentialResolver(self.credentials, self.aws_config.profile)
        resolved = resolver.resolve(self.host)

        region = self.aws_config.region or extract_region(self.host)
        try:
            # 設定済みの認証情報ならプロファイルは読まない
            session = boto3.Session(profile_name=resolved.profile)
            s3_client = session.client(
                's3',
                region_name=region,
                endpoint_url=self.aws_config.endpoint_url,
                use_ssl=True,
                config=self._client_config(),
                **resolved.client_kwargs()
            )
        except Exception as e:
            self.logger.error(f"Error creating S3 client: {e}")
            raise

        self.logger.debug(
            f"S3 client created with {resolved.source.value} credentials."
        )
        return s3_client

"""s3_tasks の例外クラス"""


class S3TaskError(Exception):
    """s3_tasks が送出する例外の基底クラス"""


class CredentialResolutionError(S3TaskError):
    """認証情報を解決できなかった"""

    def __init__(self, host: str, message: str):
        super().__init__(message)
        self.host = host


class NoCredentialProviderError(CredentialResolutionError):
    """設定にもプロバイダーチェーンにも認証情報が無い"""

    def __init__(self, host: str):
        super().__init__(
            host,
            f"Could not find S3 credentials for the host: {host}, "
            "and no IAM credentials available"
        )

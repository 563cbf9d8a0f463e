"""boto3 転送設定"""
from boto3.s3.transfer import TransferConfig

from ..models.config import TransferOptions


def create_transfer_config(options: TransferOptions) -> TransferConfig:
    """呼び出し元スレッドで1オブジェクトずつ転送する設定を作成"""
    return TransferConfig(
        multipart_threshold=options.multipart_threshold,
        multipart_chunksize=options.multipart_chunksize,
        io_chunksize=options.io_chunksize,
        use_threads=False,
    )

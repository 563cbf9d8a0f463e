"""S3タスク（アップロード/ダウンロード/削除/リンク生成）の実行"""
import os
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, TypeVar

from ..models.config import Config, Mapping, TaskSettings
from ..utils.logger import LoggerManager
from ..utils.progress import ProgressTracker
from .bucket import extract_bucket
from .s3_client import S3ClientManager
from .transfer import create_transfer_config


Item = TypeVar('Item')
Result = TypeVar('Result')


def summary_message(verb: str, objects: Sequence[str], preposition: str, bucket: str) -> str:
    """件数が1件ならその名前、それ以外は件数で要約"""
    if len(objects) == 1:
        return f"{verb} '{objects[0]}' {preposition} the bucket '{bucket}'."
    return f"{verb} {len(objects)} objects {preposition} the bucket '{bucket}'."


def expires_in(expiration_date: datetime, now: Optional[datetime] = None) -> int:
    """有効期限までの秒数（最低1秒）"""
    now = now or datetime.now(timezone.utc)
    return max(1, int((expiration_date - now).total_seconds()))


class TaskRunner:
    """1回のタスク実行。クライアントは実行ごとに1つだけ作成する"""

    def __init__(self, config: Config, settings: TaskSettings, s3_client=None):
        self.config = config
        self.settings = settings
        self.logger = LoggerManager.get_logger()
        self.bucket = extract_bucket(settings.host)
        self.transfer_config = create_transfer_config(config.transfer)

        if s3_client is None:
            client_manager = S3ClientManager(
                config.aws, settings.credentials, settings.host, config.proxy
            )
            s3_client = client_manager.get_client()
        self.s3_client = s3_client

    def _run_items(self, items: Sequence[Item],
                   operation: Callable[[Item], Result],
                   message: Callable[[Item], str],
                   summary: Callable[[Sequence[Item]], str]) -> List[Result]:
        """アイテムを順番に処理し、最後に要約を1行ログ出力"""
        results = []
        for item in items:
            try:
                results.append(operation(item))
            except Exception as e:
                self.logger.error(f"Failed on {item!r} in bucket '{self.bucket}': {e}")
                raise
            self.logger.debug(message(item))

        self.logger.info(summary(items))
        return results

    def _tracker(self, size: Optional[int], key: str) -> Optional[ProgressTracker]:
        if not self.settings.progress:
            return None
        return ProgressTracker(size, key)

    # アップロード

    def upload(self) -> List[str]:
        """マッピングのファイルをアップロードし、キーの一覧を返す"""
        return self._run_items(
            self.settings.mappings,
            self._upload_one,
            lambda m: f"Uploaded {os.path.abspath(m[0])} as {m[1]} into {self.bucket}",
            lambda ms: summary_message("Uploaded", [k for _, k in ms], "to", self.bucket),
        )

    def _upload_one(self, mapping: Mapping) -> str:
        file_path, key = mapping
        tracker = self._tracker(os.path.getsize(file_path), key)

        extra_args = self.settings.metadata.get(key)
        self.s3_client.upload_file(
            file_path,
            self.bucket,
            key,
            ExtraArgs=extra_args,
            Callback=tracker,
            Config=self.transfer_config
        )

        if tracker:
            tracker.complete()
        return key

    # ダウンロード

    def download(self) -> List[str]:
        """マッピングのキーをダウンロードし、ローカルファイルの一覧を返す"""
        return self._run_items(
            self.settings.mappings,
            self._download_one,
            lambda m: f"Downloaded {os.path.abspath(m[0])} as {m[1]} from {self.bucket}",
            lambda ms: summary_message("Downloaded", [k for _, k in ms], "from", self.bucket),
        )

    def _download_one(self, mapping: Mapping) -> str:
        file_path, key = mapping
        head = self.s3_client.head_object(Bucket=self.bucket, Key=key)
        tracker = self._tracker(head.get('ContentLength'), key)

        self.s3_client.download_file(
            self.bucket,
            key,
            file_path,
            Callback=tracker,
            Config=self.transfer_config
        )

        if tracker:
            tracker.complete()
        return file_path

    # 削除

    def delete(self) -> List[str]:
        """キーのオブジェクトを削除し、キーの一覧を返す"""
        return self._run_items(
            self.settings.keys,
            self._delete_one,
            lambda key: f"Deleted {key} from {self.bucket}",
            lambda keys: summary_message("Deleted", keys, "from", self.bucket),
        )

    def _delete_one(self, key: str) -> str:
        self.s3_client.delete_object(Bucket=self.bucket, Key=key)
        return key

    # 署名付きリンク生成

    def generate_links(self) -> List[str]:
        """期限付きのGET用URLを生成し、生成ごとに標準出力へ表示"""
        return self._run_items(
            self.settings.keys,
            self._generate_link_one,
            lambda key: f"Created link for {key} in {self.bucket}",
            lambda keys: summary_message("Generated link", keys, "from", self.bucket),
        )

    def _generate_link_one(self, key: str) -> str:
        url = self.s3_client.generate_presigned_url(
            'get_object',
            Params={'Bucket': self.bucket, 'Key': key},
            ExpiresIn=expires_in(self.settings.expiration_date),
            HttpMethod='GET'
        )
        print(f"{key} link: {url}", flush=True)
        return url

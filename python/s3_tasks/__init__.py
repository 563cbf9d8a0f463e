"""S3 Tasks パッケージ"""
from typing import List, Optional
from .models.config import Config
from .utils.logger import LoggerManager
from .core.task_runner import TaskRunner
from .errors import S3TaskError, CredentialResolutionError, NoCredentialProviderError


class S3Tasks:
    """S3タスクのメインクラス"""
    
    def __init__(self, config_path: str = "config.json", config: Optional[Config] = None):
        # 設定を読み込み
        self.config = config if config is not None else Config.from_file(config_path)
        
        # ロガーをセットアップ
        self.logger = LoggerManager.setup(self.config.logging)

    def _runner(self, name: str) -> TaskRunner:
        """実行ごとに新しいクライアントでランナーを作成"""
        return TaskRunner(self.config, self.config.task(name))

    def upload(self) -> List[str]:
        return self._runner("upload").upload()

    def download(self) -> List[str]:
        return self._runner("download").download()

    def delete(self) -> List[str]:
        return self._runner("delete").delete()

    def generate_links(self) -> List[str]:
        return self._runner("generate_links").generate_links()
        
    def run(self, task: str) -> List[str]:
        """タスク名（"generate-links" 形式も可）を指定して実行"""
        name = task.replace("-", "_")
        operations = {
            "upload": self.upload,
            "download": self.download,
            "delete": self.delete,
            "generate_links": self.generate_links,
        }
        if name not in operations:
            raise ValueError(f"Unknown task: {task}")
        return operations[name]()


__all__ = [
    'S3Tasks',
    'Config',
    'S3TaskError',
    'CredentialResolutionError',
    'NoCredentialProviderError',
]

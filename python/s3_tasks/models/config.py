"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
import json
import os
from urllib.parse import quote


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    region: Optional[str] = None
    profile: Optional[str] = None
    endpoint_url: Optional[str] = None  # S3互換ストレージ用


@dataclass
class ProxyConfig:
    """プロキシ設定"""
    host: str
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None

    def __post_init__(self):
        if not self.host or not self.host.strip():
            raise ValueError("proxy host cannot be empty")
        if self.port is not None:
            self.port = int(self.port)

    def to_url(self) -> str:
        """botocore の proxies に渡すURLを作成"""
        auth = ""
        if self.user:
            auth = quote(self.user, safe="")
            if self.password:
                auth += ":" + quote(self.password, safe="")
            auth += "@"
        port = f":{self.port}" if self.port else ""
        return f"http://{auth}{self.host}{port}"

    def to_proxies(self) -> Dict[str, str]:
        url = self.to_url()
        return {"http": url, "https": url}


@dataclass
class TransferOptions:
    """転送オプション（逐次転送で効く項目のみ）"""
    multipart_threshold: int = 8 * 1024 * 1024  # 8MB
    multipart_chunksize: int = 8 * 1024 * 1024  # 8MB
    io_chunksize: int = 262144  # 256KB

    def __post_init__(self):
        for name in ("multipart_threshold", "multipart_chunksize", "io_chunksize"):
            if int(getattr(self, name)) <= 0:
                raise ValueError(f"transfer.{name} must be positive")


@dataclass
class Credential:
    """ホスト単位の認証情報（user = Access Key ID, password = Secret Access Key）"""
    host: str
    user: str
    password: str
    realm: str = "Amazon S3"

    @classmethod
    def from_file(cls, path: str) -> 'Credential':
        """realm=/host=/user=/password= 形式のプロパティファイルから読み込み"""
        path = os.path.expanduser(path)
        if not os.path.exists(path):
            raise FileNotFoundError(f"Credentials file {path} not found.")

        properties: Dict[str, str] = {}
        with open(path, "r", encoding="utf-8") as file:
            for line in file:
                line = line.strip()
                if not line or line.startswith(("#", "!")):
                    continue
                name, sep, value = line.partition("=")
                if not sep:
                    continue
                properties[name.strip()] = value.strip()

        missing = [k for k in ("host", "user", "password") if k not in properties]
        if missing:
            raise ValueError(
                f"Credentials file {path} is missing: {', '.join(missing)}"
            )

        return cls(
            host=properties["host"],
            user=properties["user"],
            password=properties["password"],
            realm=properties.get("realm", "Amazon S3"),
        )


Mapping = Tuple[str, str]  # (ローカルパス, S3キー)


def parse_expiration_date(value: Any) -> datetime:
    """ISO 8601 文字列をUTCのdatetimeに変換（タイムゾーン無しはUTC扱い）"""
    if isinstance(value, datetime):
        date = value
    else:
        text = str(value).strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            date = datetime.fromisoformat(text)
        except ValueError:
            raise ValueError(f"Invalid expiration_date: {value}")

    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return date


@dataclass
class TaskSettings:
    """1回のタスク実行に渡す設定"""
    host: str = ""
    mappings: List[Mapping] = field(default_factory=list)
    keys: List[str] = field(default_factory=list)
    metadata: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    progress: bool = False
    expiration_date: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    credentials: List[Credential] = field(default_factory=list)

    def __post_init__(self):
        self.host = self.host or ""

        mappings = []
        for mapping in self.mappings:
            if len(mapping) != 2:
                raise ValueError(
                    f"Invalid mapping {mapping!r}: expected [local_path, s3_key]"
                )
            local_path, key = mapping
            mappings.append((str(local_path), str(key)))
        self.mappings = mappings

        self.keys = [str(key) for key in self.keys]

        for key, fields in self.metadata.items():
            if not isinstance(fields, dict):
                raise TypeError(
                    f"metadata for '{key}' must be dict, got {type(fields)}"
                )

        self.expiration_date = parse_expiration_date(self.expiration_date)

        self.credentials = [
            c if isinstance(c, Credential) else Credential(**c)
            for c in self.credentials
        ]


TASK_SECTIONS = ("upload", "download", "delete", "generate_links")


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    aws: AWSConfig = field(default_factory=AWSConfig)
    transfer: TransferOptions = field(default_factory=TransferOptions)
    proxy: Optional[ProxyConfig] = None
    credentials: List[Credential] = field(default_factory=list)
    tasks: Dict[str, TaskSettings] = field(default_factory=dict)

    def task(self, name: str) -> TaskSettings:
        """タスク設定を取得（未設定ならデフォルト値）"""
        if name not in TASK_SECTIONS:
            raise ValueError(
                f"Unknown task: {name}. Expected one of: {', '.join(TASK_SECTIONS)}"
            )
        if name not in self.tasks:
            self.tasks[name] = TaskSettings(credentials=list(self.credentials))
        return self.tasks[name]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """辞書から設定を作成"""
        logging_config = LoggingConfig(**data.get("logging", {}))
        aws_config = AWSConfig(**data.get("aws", {}))
        transfer = TransferOptions(**data.get("transfer", {}))
        proxy = ProxyConfig(**data["proxy"]) if data.get("proxy") else None

        credentials = [Credential(**c) for c in data.get("credentials", [])]
        for path in data.get("credentials_files", []):
            credentials.append(Credential.from_file(path))

        # タスク固有の認証情報を優先し、共通の認証情報を後ろに連結
        tasks = {}
        for name in TASK_SECTIONS:
            section = data.get(name)
            if section is None:
                continue
            section = dict(section)
            task_credentials = [
                Credential(**c) for c in section.pop("credentials", [])
            ]
            tasks[name] = TaskSettings(
                credentials=task_credentials + credentials, **section
            )

        return cls(
            logging=logging_config,
            aws=aws_config,
            transfer=transfer,
            proxy=proxy,
            credentials=credentials,
            tasks=tasks,
        )

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """設定ファイルから読み込み"""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file {config_path} not found.")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding JSON from {config_path}: {e}")

        try:
            return cls.from_dict(data)
        except (ValueError, TypeError, FileNotFoundError):
            raise
        except Exception as e:
            raise RuntimeError(f"Error loading configuration: {e}")

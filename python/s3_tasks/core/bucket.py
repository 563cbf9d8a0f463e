"""ホスト文字列からバケット名を取り出す"""
import re
from typing import Optional

import boto3

# ".s3.amazonaws.com" または ".s3-<region>.amazonaws.com"（末尾のみ）
_S3_SUFFIX = re.compile(r"\.s3(?:-([a-z0-9-]+))?\.amazonaws\.com$", re.IGNORECASE)

# リージョン名ではないラベル
_REGION_ALIASES = {"external-1": "us-east-1"}


def extract_bucket(host: str) -> str:
    """S3のドメインサフィックスを取り除く。一致しなければホスト名がそのままバケット名（CNAME）"""
    host = host or ""
    match = _S3_SUFFIX.search(host)
    if match is None:
        return host
    return host[:match.start()]


def extract_region(host: str) -> Optional[str]:
    """リージョン付きの形式ならリージョン名を返す（boto3が知らない名前ならNone）"""
    match = _S3_SUFFIX.search(host or "")
    if match is None or match.group(1) is None:
        return None

    label = match.group(1).lower()
    region = _REGION_ALIASES.get(label, label)
    if region not in boto3.Session().get_available_regions('s3'):
        return None
    return region

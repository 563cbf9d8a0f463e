"""コマンドラインインターフェース"""
import argparse
import sys
from typing import List, Optional

from . import S3Tasks
from .models.config import Config

TASKS = ["upload", "download", "delete", "generate-links"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3-tasks",
        description="Upload, download, delete or link objects in an S3 bucket."
    )
    parser.add_argument("task", choices=TASKS)
    parser.add_argument("-c", "--config", default="config.json",
                        help="path of the JSON configuration file")
    parser.add_argument("--progress", action="store_true",
                        help="show a progress bar while transferring")
    parser.add_argument("--log-level", default=None,
                        help="override the configured log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """メイン関数（終了コードを返す）"""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_file(args.config)
        if args.log_level:
            config.logging.level = args.log_level
        if args.progress:
            config.task(args.task.replace("-", "_")).progress = True

        tasks = S3Tasks(config=config)
        tasks.run(args.task)
        return 0

    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

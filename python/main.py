#!/usr/bin/env python3
"""S3 Tasks - エントリーポイント"""
import sys

from s3_tasks.cli import main


if __name__ == "__main__":
    sys.exit(main())

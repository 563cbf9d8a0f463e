"""ユーティリティ"""
from .logger import LoggerManager
from .progress import ProgressTracker, progress_bar, display_name

__all__ = ['LoggerManager', 'ProgressTracker', 'progress_bar', 'display_name']

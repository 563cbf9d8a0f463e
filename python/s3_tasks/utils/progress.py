"""転送進捗の表示"""
import os
import sys
from typing import Optional, TextIO


BAR_WIDTH = 50
NAME_AREA = 30


def progress_bar(percent: int) -> str:
    """進捗バーの文字列を作成（'=' 1つで2%）"""
    filled = percent // 2
    bar = "=" * filled
    if filled < BAR_WIDTH:
        bar += ">" + " " * (BAR_WIDTH - 1 - filled)
    return f"\r[{bar}]   {percent:>3}%   "


def display_name(key: str) -> str:
    """キーのファイル名部分を表示幅に収める"""
    name = os.path.basename(key)
    if len(name) > NAME_AREA - 3:
        return "..." + name[len(name) - NAME_AREA + 3:]
    return name


class ProgressTracker:
    """単一オブジェクトの転送進捗を追跡"""
    
    def __init__(self, total_size: Optional[int], key: str,
                 stream: Optional[TextIO] = None):
        self.total_size = total_size or 0
        self.filename = display_name(key)
        self.transferred_size = 0
        self.stream = stream if stream is not None else sys.stdout
        
    def __call__(self, bytes_transferred: int):
        """boto3のコールバック関数として使用"""
        self.transferred_size += bytes_transferred
        self._display_progress()

    @property
    def percent(self) -> int:
        if self.total_size <= 0:
            return 100
        return min(100, (self.transferred_size * 100) // self.total_size)
            
    def _display_progress(self):
        """同じ行に進捗を上書き表示"""
        self.stream.write(progress_bar(self.percent) + self.filename)
        self.stream.flush()
    
    def complete(self):
        """転送完了（ここでだけ改行する）"""
        self._display_progress()
        self.stream.write("\n")
        self.stream.flush()

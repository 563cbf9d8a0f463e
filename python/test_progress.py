#!/usr/bin/env python3
"""進捗表示のテスト"""
import io

from s3_tasks.utils.progress import ProgressTracker, display_name, progress_bar


def test_progress_bar_empty():
    assert progress_bar(0) == "\r[>" + " " * 49 + "]     0%   "


def test_progress_bar_full():
    assert progress_bar(100) == "\r[" + "=" * 50 + "]   100%   "


def test_progress_bar_rounds_down_to_two_percent():
    assert progress_bar(51) == "\r[" + "=" * 25 + ">" + " " * 24 + "]    51%   "
    assert progress_bar(50) == progress_bar(51).replace("51", "50")
    assert progress_bar(9).startswith("\r[" + "=" * 4 + ">")


def test_progress_bar_width_is_fixed():
    for percent in (0, 1, 9, 10, 50, 99, 100):
        bar = progress_bar(percent)
        assert bar.index("]") == 52


def test_display_name_uses_basename():
    assert display_name("pongo/zipb.jar") == "zipb.jar"


def test_display_name_truncates_long_names():
    name = "a-really-long-artifact-name-0123456789.tar.gz"
    shown = display_name("releases/" + name)
    assert len(shown) == 30
    assert shown == "..." + name[-27:]


def test_tracker_accumulates_and_rewrites_line():
    out = io.StringIO()
    tracker = ProgressTracker(200, "dir/file.bin", stream=out)
    tracker(50)
    tracker(50)

    assert tracker.transferred_size == 100
    assert tracker.percent == 50
    assert "\n" not in out.getvalue()
    assert out.getvalue().endswith("]    50%   file.bin")


def test_tracker_complete_writes_newline():
    out = io.StringIO()
    tracker = ProgressTracker(10, "file.bin", stream=out)
    tracker(10)
    tracker.complete()

    assert out.getvalue().endswith("]   100%   file.bin\n")
    assert out.getvalue().count("\n") == 1


def test_tracker_unknown_size_is_complete():
    out = io.StringIO()
    for size in (0, None):
        tracker = ProgressTracker(size, "empty.txt", stream=out)
        assert tracker.percent == 100


def test_tracker_caps_at_hundred():
    tracker = ProgressTracker(10, "file.bin", stream=io.StringIO())
    tracker(25)
    assert tracker.percent == 100

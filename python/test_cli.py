#!/usr/bin/env python3
"""コマンドラインのテスト"""
import json
from unittest.mock import patch

import pytest

from s3_tasks import S3Tasks
from s3_tasks.cli import main
from s3_tasks.models.config import Config


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "logging": {"level": "DEBUG"},
        "delete": {"host": "bucket.s3.amazonaws.com", "keys": []},
    }), encoding="utf-8")
    return str(path)


def test_missing_config_exits_with_error(tmp_path, capsys):
    code = main(["upload", "--config", str(tmp_path / "missing.json")])

    assert code == 1
    assert capsys.readouterr().out.startswith("Error: Configuration file")


def test_unknown_task_is_rejected():
    with pytest.raises(SystemExit):
        main(["sync"])


@patch("s3_tasks.cli.S3Tasks")
def test_runs_named_task(tasks_cls, config_path):
    assert main(["generate-links", "--config", config_path, "--progress"]) == 0

    config = tasks_cls.call_args.kwargs['config']
    assert config.task("generate_links").progress is True
    tasks_cls.return_value.run.assert_called_once_with("generate-links")


@patch("s3_tasks.cli.S3Tasks")
def test_task_failure_exits_with_error(tasks_cls, config_path, capsys):
    tasks_cls.return_value.run.side_effect = RuntimeError("boom")

    assert main(["delete", "--config", config_path]) == 1
    assert capsys.readouterr().out == "Error: boom\n"


def test_no_credentials_is_reported(config_path, capsys):
    assert main(["delete", "--config", config_path]) == 1
    assert "Could not find S3 credentials for the host: bucket.s3.amazonaws.com" \
        in capsys.readouterr().out


@patch("s3_tasks.TaskRunner")
def test_s3_tasks_run_dispatch(runner_cls):
    tasks = S3Tasks(config=Config())
    runner_cls.return_value.delete.return_value = ["a.txt"]

    assert tasks.run("delete") == ["a.txt"]
    settings = runner_cls.call_args.args[1]
    assert settings is tasks.config.task("delete")

    tasks.run("generate-links")
    runner_cls.return_value.generate_links.assert_called_once_with()

    with pytest.raises(ValueError):
        tasks.run("sync")

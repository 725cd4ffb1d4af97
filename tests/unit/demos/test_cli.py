"""
Unit tests for command line routing.
"""

from __future__ import annotations

import pytest

from mlpipelines import cli
from mlpipelines.config import Settings


@pytest.fixture
def cli_settings(monkeypatch: pytest.MonkeyPatch, demo_datasets: Settings) -> Settings:
    monkeypatch.setattr(cli, "get_settings", lambda: demo_datasets)
    monkeypatch.setattr(cli, "setup_logging", lambda settings, level=None: None)
    return demo_datasets


class TestParser:
    def test_issue_defaults(self) -> None:
        args = cli.build_parser().parse_args(["issues", "train"])

        assert args.profile == "en"
        assert args.title is None
        assert args.handler is cli.run_issues

    def test_unknown_profile_rejected(self) -> None:
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["issues", "train", "--profile", "fr"])

    def test_log_level_is_case_insensitive(self) -> None:
        args = cli.build_parser().parse_args(["--log-level", "debug", "taxi"])

        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--log-level", "chatty", "taxi"])

        assert excinfo.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestMain:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main([]) == 0
        assert "usage: mlpipelines" in capsys.readouterr().out

    def test_taxi(self, cli_settings: Settings, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["taxi"]) == 0
        assert "Predicted fare" in capsys.readouterr().out

    def test_sentiment_separate_test(self, cli_settings: Settings) -> None:
        assert cli.main(["sentiment", "--separate-test"]) == 0
        assert cli_settings.sentiment.model_path.exists()

    def test_issues_train_then_predict(
        self, cli_settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert cli.main(["issues", "train"]) == 0
        capsys.readouterr()

        exit_code = cli.main(
            ["issues", "predict", "--title", "socket latency", "--description", "http is slow"]
        )

        assert exit_code == 0
        assert "Result: area-networking" in capsys.readouterr().out

    def test_korean_train_then_default_predict(
        self, cli_settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert cli.main(["issues", "train", "--profile", "ko"]) == 0
        capsys.readouterr()

        assert cli.main(["issues", "predict", "--profile", "ko"]) == 0
        assert "Result: 한약방" in capsys.readouterr().out

    def test_predict_without_model_fails(self, cli_settings: Settings) -> None:
        assert cli.main(["issues", "predict"]) == 1

    def test_missing_dataset_fails(
        self, cli_settings: Settings, caplog: pytest.LogCaptureFixture
    ) -> None:
        cli_settings.taxi.train_path.unlink()

        assert cli.main(["taxi"]) == 1
        assert "taxi failed" in caplog.text

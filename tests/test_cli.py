# SPDX-License-Identifier: Apache-2.0
"""Tests for the command line interface."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from papago_translator.cli import create_config, list_targets, main, parse_args
from papago_translator.translator import Config, Translator

ENV_VARS = [
    "TEXT_CAPTURE_PAPAGO_CLIENT_ID",
    "TEXT_CAPTURE_PAPAGO_CLIENT_SECRET",
    "PAPAGO_CLIENT_ID",
    "PAPAGO_CLIENT_SECRET",
    "NAVER_CLIENT_ID",
    "NAVER_CLIENT_SECRET",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self) -> None:
        args = parse_args(["Hello"])
        assert args.text == "Hello"
        assert args.source == "auto"
        assert args.target == "en"
        assert args.honorific is None
        assert args.list_targets is False
        assert args.verbose is False

    def test_languages(self) -> None:
        args = parse_args(["Hello", "-s", "en", "-t", "ko"])
        assert args.source == "en"
        assert args.target == "ko"

    def test_honorific_flags(self) -> None:
        assert parse_args(["Hi", "--honorific"]).honorific is True
        assert parse_args(["Hi", "--no-honorific"]).honorific is False

    def test_text_optional_for_list_targets(self) -> None:
        args = parse_args(["--list-targets", "-s", "ja"])
        assert args.list_targets is True
        assert args.text == ""


class TestCreateConfig:
    """Tests for create_config."""

    def test_options_override_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NAVER_CLIENT_ID", "env-id")
        clean_env.setenv("NAVER_CLIENT_SECRET", "env-secret")
        args = parse_args(["Hi", "--client-id", "cli-id"])
        assert create_config(args) == Config("cli-id", "env-secret")

    def test_no_credentials(self) -> None:
        assert create_config(parse_args(["Hi"])) == Config("", "")


class TestListTargets:
    """Tests for --list-targets."""

    def test_prints_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert list_targets("zh-Hans") == 0
        assert capsys.readouterr().out.split() == ["en", "ko", "ja", "zh-TW"]

    def test_auto_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        """auto has no fixed targets but is still a valid source."""
        assert list_targets("auto") == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_unknown_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert list_targets("xx") == 1
        assert "Error: Invalid source language: xx" in capsys.readouterr().err

    def test_main_list_targets_default_source(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Plain --list-targets uses the default auto source and succeeds."""
        assert main(["--list-targets"]) == 0
        assert capsys.readouterr().out == ""

    def test_main_list_targets(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-targets", "-s", "es"]) == 0
        assert capsys.readouterr().out.split() == ["en", "ko"]


class TestMain:
    """Tests for translation through main()."""

    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        mock_translate = AsyncMock(return_value="안녕하세요")
        with patch.object(Translator, "translate", mock_translate):
            code = main(["Hello", "-s", "en", "-t", "ko", "--honorific",
                         "--client-id", "id", "--client-secret", "secret"])  # fmt: skip

        assert code == 0
        assert capsys.readouterr().out.strip() == "안녕하세요"
        mock_translate.assert_awaited_once_with("Hello", "en", "ko", honorific=True)

    def test_missing_credentials(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["Hello", "-t", "ko"]) == 1
        assert "Error: NAVER_CLIENT_ID is not set" in capsys.readouterr().err

    def test_invalid_language(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["Hello", "-t", "xx", "--client-id", "id", "--client-secret", "s"])
        assert code == 1
        assert "Error: Invalid target language" in capsys.readouterr().err

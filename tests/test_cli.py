from __future__ import annotations

import logging
from pathlib import Path

import pytest

from korean_utils import cli


@pytest.fixture(autouse=True)
def no_logging_config(monkeypatch) -> None:
    # basicConfig would attach handlers to the root logger for the rest of the session
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)


def _run(capsys, *argv: str) -> tuple[int, str]:
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


def test_compose_and_decompose(capsys) -> None:
    assert _run(capsys, "compose", "ㄷㅏㄺㄱㅗㄱㅣ") == (0, "닭고기\n")
    assert _run(capsys, "decompose", "닭고기") == (0, "ㄷㅏㄹㄱㄱㅗㄱㅣ\n")
    assert _run(capsys, "decompose", "--keep-compounds", "닭고기") == (0, "ㄷㅏㄺㄱㅗㄱㅣ\n")
    code, out = _run(capsys, "decompose", "--conjoining", "한")
    assert (code, out) == (0, "\u1112\u1161\u11ab\n")


def test_search_commands_set_exit_code(capsys) -> None:
    assert _run(capsys, "contains", "홍길동", "ㅎㄱㄷ") == (0, "true\n")
    assert _run(capsys, "contains", "홍길동", "김") == (1, "false\n")
    assert _run(capsys, "startswith", "홍길동", "홍ㄱ") == (0, "true\n")
    assert _run(capsys, "endswith", "홍길동", "길ㄷ") == (1, "false\n")


def test_keyboard_commands(capsys) -> None:
    assert _run(capsys, "typed-to-korean", "ghdrlfehd") == (0, "홍길동\n")
    assert _run(capsys, "typed-to-english", "까치") == (0, "Rkcl\n")


def test_josa_command_accepts_lowercase_names(capsys) -> None:
    assert _run(capsys, "josa", "사슴", "eun_neun") == (0, "사슴은\n")


def test_ngram_command(capsys) -> None:
    assert _run(capsys, "ngram", "-n", "2", "--split", "닭발") == (0, "ㄷㅏ\nㅏㄹ\nㄹㄱ\nㄱㅂ\nㅂㅏ\nㅏㄹ\n")


def test_ngram_rejects_bad_length(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["ngram", "-n", "0", "홍길동"])
    assert excinfo.value.code == 2


def test_length_command_reads_settings(capsys, isolated_settings: Path) -> None:
    assert _run(capsys, "length", "일이삼123") == (0, "9\n")
    assert _run(capsys, "length", "--hangul-width", "3", "일이삼123") == (0, "12\n")

    isolated_settings.write_text("hangul_width: 1\n", encoding="utf-8")
    assert _run(capsys, "length", "일이삼123") == (0, "6\n")


def test_log_level_option_and_setting(monkeypatch, capsys, isolated_settings: Path) -> None:
    levels: list[str] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"]))

    cli.main(["compose", "ㄱ"])
    cli.main(["--log-level", "DEBUG", "compose", "ㄱ"])
    isolated_settings.write_text("log_level: error\n", encoding="utf-8")
    cli.main(["compose", "ㄱ"])

    assert levels == ["WARNING", "DEBUG", "ERROR"]

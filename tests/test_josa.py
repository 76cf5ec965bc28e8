from __future__ import annotations

import pytest

from korean_utils.services.josa import Josa, attach_josa


@pytest.mark.parametrize(
    "text, expected",
    [
        ("사슴", "사슴은"),
        ("사자", "사자는"),
        ("TV", "TV는"),
        ("123", "123은"),
        ("1234", "1234는"),
        ("道路", "道路는"),
        ("Sofia", "Sofia는"),
        ("Hazel", "Hazel은"),
    ],
)
def test_eun_neun(text: str, expected: str) -> None:
    assert attach_josa(text, Josa.EUN_NEUN) == expected


def test_other_pairs() -> None:
    assert attach_josa("사슴", Josa.I_GA) == "사슴이"
    assert attach_josa("사자", Josa.I_GA) == "사자가"
    assert attach_josa("사슴", Josa.EUL_REUL) == "사슴을"
    assert attach_josa("사자", Josa.EUL_REUL) == "사자를"
    assert attach_josa("사슴", Josa.GWA_WA) == "사슴과"
    assert attach_josa("사자", Josa.GWA_WA) == "사자와"
    assert attach_josa("사슴", Josa.EURO_RO) == "사슴으로"
    assert attach_josa("사자", Josa.EURO_RO) == "사자로"
    assert attach_josa("사슴", Josa.A_YA) == "사슴아"
    assert attach_josa("사자", Josa.A_YA) == "사자야"


def test_empty_text() -> None:
    assert attach_josa(None, Josa.EUN_NEUN) == ""
    assert attach_josa("", Josa.I_GA) == ""


def test_pick() -> None:
    assert Josa.EUN_NEUN.pick(True) == "은"
    assert Josa.EUN_NEUN.pick(False) == "는"
    assert Josa.EURO_RO.after_consonant == "으로"
    assert Josa.EURO_RO.after_vowel == "로"

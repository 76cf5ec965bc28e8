from __future__ import annotations

import pytest

from korean_utils.services.ngram import ngram


def test_ngram_latin() -> None:
    assert ngram("abcd", 2) == ["ab", "bc", "cd"]
    assert ngram("ab cd", 2) == ["ab", "cd"]


def test_ngram_recomposed() -> None:
    assert ngram("홍길동", 2) == ["호", "ㅗㅇ", "ㅇㄱ", "기", "ㅣㄹ", "ㄹㄷ", "도", "ㅗㅇ"]
    assert ngram("홍길동", 3) == ["홍", "ㅗㅇㄱ", "ㅇ기", "길", "ㅣㄹㄷ", "ㄹ도", "동"]


def test_ngram_split() -> None:
    assert ngram("홍길동", 2, True) == ["ㅎㅗ", "ㅗㅇ", "ㅇㄱ", "ㄱㅣ", "ㅣㄹ", "ㄹㄷ", "ㄷㅗ", "ㅗㅇ"]
    assert ngram("홍길동", 3, True) == ["ㅎㅗㅇ", "ㅗㅇㄱ", "ㅇㄱㅣ", "ㄱㅣㄹ", "ㅣㄹㄷ", "ㄹㄷㅗ", "ㄷㅗㅇ"]


def test_ngram_compound_jamo() -> None:
    assert ngram("닭발", 2, True) == ["ㄷㅏ", "ㅏㄹ", "ㄹㄱ", "ㄱㅂ", "ㅂㅏ", "ㅏㄹ"]
    assert ngram("닭발", 2, False) == ["다", "ㅏㄺ", "ㄺㅂ", "바", "ㅏㄹ"]


def test_ngram_window_longer_than_word() -> None:
    assert ngram("가", 5) == []
    assert ngram("", 2) == []
    assert ngram(None, 2) == []


def test_ngram_rejects_non_positive_length() -> None:
    with pytest.raises(ValueError):
        ngram("홍길동", 0)

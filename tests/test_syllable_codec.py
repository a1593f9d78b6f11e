from __future__ import annotations

import pytest

from hangul_liaison.domain.errors import HangulError, NonKoreanError
from hangul_liaison.domain.jamo import Choseong, Jongseong, Jungseong
from hangul_liaison.domain.syllable import S_BASE, S_LAST, Syllable, compose, decompose, is_korean_syllable


def test_round_trip_over_whole_range() -> None:
    for code in range(S_BASE, S_LAST + 1):
        ch = chr(code)
        assert compose(decompose(ch)) == ch


def test_range_has_11172_syllables() -> None:
    assert S_LAST - S_BASE + 1 == 19 * 21 * 28


@pytest.mark.parametrize("ch,expected", [
    ("\uabff", False), ("\uac00", True), ("\ud7a3", True), ("\ud7a4", False),
    ("a", False), ("ㄱ", False), ("ㅏ", False), ("\u1100", False), ("", False), ("가나", False),
])
def test_is_korean_syllable_boundaries(ch: str, expected: bool) -> None:
    assert is_korean_syllable(ch) is expected


@pytest.mark.parametrize("ch,syllable", [
    ("가", Syllable(Choseong.Kiyeok, Jungseong.A, None)),
    ("힣", Syllable(Choseong.Hieuh, Jungseong.I, Jongseong.Hieuh)),
    ("잌", Syllable(Choseong.Ieung, Jungseong.I, Jongseong.Khieukh)),
    ("영", Syllable(Choseong.Ieung, Jungseong.Yeo, Jongseong.Ieung)),
    ("선", Syllable(Choseong.Sios, Jungseong.Eo, Jongseong.Nieun)),
    ("일", Syllable(Choseong.Ieung, Jungseong.I, Jongseong.Rieul)),
])
def test_known_syllables(ch: str, syllable: Syllable) -> None:
    assert decompose(ch) == syllable
    assert compose(syllable) == ch
    assert syllable.to_char() == ch
    assert Syllable.from_char(ch) == syllable


@pytest.mark.parametrize("ch", ["@", "E", "\U0001D11E", "ㄱ", "\uabff", "\ud7a4"])
def test_decompose_rejects_non_syllables(ch: str) -> None:
    with pytest.raises(NonKoreanError) as excinfo:
        decompose(ch)
    assert excinfo.value.character == ch
    assert isinstance(excinfo.value, HangulError)
    assert isinstance(excinfo.value, ValueError)


def test_no_final_is_none_not_a_member() -> None:
    assert decompose("아").final is None
    assert None not in set(Jongseong)
    assert len(Jongseong) == 27


def test_with_initial_and_final_return_copies() -> None:
    s = decompose("밖")
    moved = s.with_final(None).with_initial(Choseong.Ieung)
    assert compose(moved) == "아"
    assert compose(s) == "밖"

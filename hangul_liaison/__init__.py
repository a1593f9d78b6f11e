"""Hangul syllable decomposition and liaison (연음) text transforms."""

from hangul_liaison.domain.errors import (
    HangulError,
    NonJaeumError,
    NonJamoError,
    NonKoreanError,
    NotApplicableToChoseongError,
    NotApplicableToJongseongError,
)
from hangul_liaison.domain.flip import flip_horizontally
from hangul_liaison.domain.jamo import Choseong, Jaeum, Jongseong, Jungseong, Moeum
from hangul_liaison.domain.liaison import pullup, pullup_with_options, pushdown, pushdown_with_options
from hangul_liaison.domain.syllable import Syllable, compose, decompose, is_korean_syllable

__all__ = [
    "Choseong",
    "HangulError",
    "Jaeum",
    "Jongseong",
    "Jungseong",
    "Moeum",
    "NonJaeumError",
    "NonJamoError",
    "NonKoreanError",
    "NotApplicableToChoseongError",
    "NotApplicableToJongseongError",
    "Syllable",
    "compose",
    "decompose",
    "flip_horizontally",
    "is_korean_syllable",
    "pullup",
    "pullup_with_options",
    "pushdown",
    "pushdown_with_options",
]

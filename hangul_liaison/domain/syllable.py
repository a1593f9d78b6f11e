from __future__ import annotations

"""Precomposed Hangul syllable codec (domain layer).

A syllable in U+AC00..U+D7A3 is a fixed-radix number:

    SBase + (LIndex * VCount + VIndex) * TCount + TIndex

with VCount = 21 vowels and TCount = 28 final slots (slot 0 = no final).
`decompose()` and `compose()` are exact inverses over all 11,172 syllables.
"""

from dataclasses import dataclass, replace
from typing import Final, Optional

from hangul_liaison.domain.errors import HangulError, NonKoreanError
from hangul_liaison.domain.jamo import Choseong, Jaeum, Jongseong, Jungseong


# Unicode Hangul syllable constants
S_BASE: Final[int] = 0xAC00
S_LAST: Final[int] = 0xD7A3
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28


@dataclass(frozen=True)
class Syllable:
    """One modern Korean syllable block."""

    initial: Choseong
    medial: Jungseong
    final: Optional[Jongseong] = None

    @classmethod
    def from_char(cls, character: str) -> "Syllable":
        return decompose(character)

    def to_char(self) -> str:
        return compose(self)

    def with_initial(self, initial: Choseong) -> "Syllable":
        return replace(self, initial=initial)

    def with_final(self, final: Optional[Jongseong]) -> "Syllable":
        return replace(self, final=final)

    def __str__(self) -> str:
        return compose(self)


def is_korean_syllable(character: str) -> bool:
    """True iff `character` is a single precomposed syllable (U+AC00..U+D7A3)."""
    if len(character) != 1:
        return False
    return S_BASE <= ord(character) <= S_LAST


def decompose(character: str) -> Syllable:
    """Split a precomposed syllable into (initial, medial, optional final).

    Raises:
        NonKoreanError: if `character` is not in the precomposed syllable range.
    """
    if not is_korean_syllable(character):
        raise NonKoreanError(character)

    offset = ord(character) - S_BASE
    final_index = offset % T_COUNT
    vowel_index = (offset // T_COUNT) % V_COUNT
    initial_index = offset // (T_COUNT * V_COUNT)

    return Syllable(
        initial=Choseong(initial_index),
        medial=Jungseong(vowel_index),
        final=Jongseong(final_index) if final_index else None,
    )


def compose(syllable: Syllable) -> str:
    """Inverse of `decompose()`; total for any well-formed Syllable."""
    final_index = syllable.final.value if syllable.final is not None else 0
    codepoint = S_BASE + (syllable.initial.value * V_COUNT + syllable.medial.value) * T_COUNT + final_index
    return chr(codepoint)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if len(l) != 1 or len(v) != 1 or len(t) > 1:
        return ""

    try:
        syllable = Syllable(
            initial=Choseong.from_char(l),
            medial=Jungseong.from_char(v),
            final=Jongseong.from_char(t) if t else None,
        )
    except HangulError:
        return ""
    return compose(syllable)


def decompose_to_jamo(character: str) -> tuple[str, str, str]:
    """Return the compatibility jamo of a syllable; the final is "" when absent."""
    syllable = decompose(character)
    tail = Jaeum.from_jongseong(syllable.final).to_char() if syllable.final is not None else ""
    return (
        Jaeum.from_choseong(syllable.initial).to_char(),
        syllable.medial.to_char(),
        tail,
    )

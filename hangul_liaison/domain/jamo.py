from __future__ import annotations

"""Modern Hangul jamo enumerations (domain layer).

Four closed sets, each in standard Unicode Hangul order:
  - Choseong  : the 19 initial consonants
  - Jungseong : the 21 medial vowels (`Moeum` is the same set)
  - Jongseong : the 27 final consonants; "no final" is `None`, never a member
  - Jaeum     : the 30 compatibility consonant letters used for display

Member values are the positional index used by syllable arithmetic
(Jongseong starts at 1 so it can be added straight into a codepoint), except
for Jaeum, whose values are the compatibility codepoints themselves.

Conversions between roles go through `Jaeum` and are matched by member name;
a consonant that has no counterpart in the target role raises the matching
`NotApplicableTo...` error.
"""

from enum import Enum
from typing import Final

from hangul_liaison.domain.errors import (
    NonJaeumError,
    NonJamoError,
    NotApplicableToChoseongError,
    NotApplicableToJongseongError,
)


# -----------------------------------------------------------------------------
# Unicode ranges
# -----------------------------------------------------------------------------

CHOSEONG_BASE: Final[int] = 0x1100
JUNGSEONG_BASE: Final[int] = 0x1161
# Jongseong.Kiyeok (value 1) lives at U+11A8
JONGSEONG_BASE: Final[int] = 0x11A7

JAEUM_FIRST: Final[int] = 0x3131
JAEUM_LAST: Final[int] = 0x314E
MOEUM_FIRST: Final[int] = 0x314F
MOEUM_LAST: Final[int] = 0x3163

HALFWIDTH_JAEUM_FIRST: Final[int] = 0xFFA1
HALFWIDTH_JAEUM_LAST: Final[int] = 0xFFBE
_HALFWIDTH_JAEUM_OFFSET: Final[int] = 0xCE70

# Halfwidth vowels come in four runs separated by unassigned gaps:
# (first codepoint, last codepoint, Jungseong index of the first one)
_HALFWIDTH_MOEUM_RUNS: Final[tuple[tuple[int, int, int], ...]] = (
    (0xFFC2, 0xFFC7, 0),
    (0xFFCA, 0xFFCF, 6),
    (0xFFD2, 0xFFD7, 12),
    (0xFFDA, 0xFFDC, 18),
)


class Choseong(Enum):
    """Initial consonants (초성)."""

    Kiyeok = 0
    SsangKiyeok = 1
    Nieun = 2
    Tikeut = 3
    SsangTikeut = 4
    Rieul = 5
    Mieum = 6
    Pieup = 7
    SsangPieup = 8
    Sios = 9
    SsangSios = 10
    Ieung = 11
    Cieuc = 12
    SsangCieuc = 13
    Chieuch = 14
    Khieukh = 15
    Thieuth = 16
    Phieuph = 17
    Hieuh = 18

    @classmethod
    def from_char(cls, character: str) -> "Choseong":
        """Accept a conjoining initial jamo (U+1100..) or a compatibility letter."""
        code = ord(character)
        if CHOSEONG_BASE <= code < CHOSEONG_BASE + len(cls):
            return cls(code - CHOSEONG_BASE)
        return Jaeum.from_char(character).to_choseong()

    def to_char(self) -> str:
        """Return the conjoining jamo for this initial consonant."""
        return chr(CHOSEONG_BASE + self.value)

    def to_jaeum(self) -> "Jaeum":
        return Jaeum.from_choseong(self)

    def to_jongseong(self) -> "Jongseong":
        return self.to_jaeum().to_jongseong()


class Jungseong(Enum):
    """Medial vowels (중성)."""

    A = 0
    Ae = 1
    Ya = 2
    Yae = 3
    Eo = 4
    E = 5
    Yeo = 6
    Ye = 7
    O = 8
    Wa = 9
    Wae = 10
    Oe = 11
    Yo = 12
    U = 13
    Weo = 14
    We = 15
    Wi = 16
    Yu = 17
    Eu = 18
    Yi = 19
    I = 20

    @classmethod
    def from_char(cls, character: str) -> "Jungseong":
        """Accept conjoining, compatibility or halfwidth vowel jamo."""
        code = ord(character)
        if JUNGSEONG_BASE <= code < JUNGSEONG_BASE + len(cls):
            return cls(code - JUNGSEONG_BASE)
        if MOEUM_FIRST <= code <= MOEUM_LAST:
            return cls(code - MOEUM_FIRST)
        for first, last, index in _HALFWIDTH_MOEUM_RUNS:
            if first <= code <= last:
                return cls(index + code - first)
        raise NonJamoError(character)

    def to_char(self) -> str:
        """Return the compatibility letter, which is what people type and read."""
        return chr(MOEUM_FIRST + self.value)

    def to_conjoining_char(self) -> str:
        return chr(JUNGSEONG_BASE + self.value)


Moeum = Jungseong


class Jongseong(Enum):
    """Final consonants (종성). An absent final is represented by `None`."""

    Kiyeok = 1
    SsangKiyeok = 2
    KiyeokSios = 3
    Nieun = 4
    NieunCieuc = 5
    NieunHieuh = 6
    Tikeut = 7
    Rieul = 8
    RieulKiyeok = 9
    RieulMieum = 10
    RieulPieup = 11
    RieulSios = 12
    RieulThieuth = 13
    RieulPhieuph = 14
    RieulHieuh = 15
    Mieum = 16
    Pieup = 17
    PieupSios = 18
    Sios = 19
    SsangSios = 20
    Ieung = 21
    Cieuc = 22
    Chieuch = 23
    Khieukh = 24
    Thieuth = 25
    Phieuph = 26
    Hieuh = 27

    @classmethod
    def from_char(cls, character: str) -> "Jongseong":
        """Accept a conjoining final jamo (U+11A8..) or a compatibility letter."""
        code = ord(character)
        if JONGSEONG_BASE < code <= JONGSEONG_BASE + len(cls):
            return cls(code - JONGSEONG_BASE)
        return Jaeum.from_char(character).to_jongseong()

    def to_char(self) -> str:
        """Return the conjoining jamo for this final consonant."""
        return chr(JONGSEONG_BASE + self.value)

    def to_jaeum(self) -> "Jaeum":
        return Jaeum.from_jongseong(self)

    def to_choseong(self) -> Choseong:
        return self.to_jaeum().to_choseong()


class Jaeum(Enum):
    """Compatibility consonant letters (자음), valued by codepoint."""

    Kiyeok = 0x3131
    SsangKiyeok = 0x3132
    KiyeokSios = 0x3133
    Nieun = 0x3134
    NieunCieuc = 0x3135
    NieunHieuh = 0x3136
    Tikeut = 0x3137
    SsangTikeut = 0x3138
    Rieul = 0x3139
    RieulKiyeok = 0x313A
    RieulMieum = 0x313B
    RieulPieup = 0x313C
    RieulSios = 0x313D
    RieulThieuth = 0x313E
    RieulPhieuph = 0x313F
    RieulHieuh = 0x3140
    Mieum = 0x3141
    Pieup = 0x3142
    SsangPieup = 0x3143
    PieupSios = 0x3144
    Sios = 0x3145
    SsangSios = 0x3146
    Ieung = 0x3147
    Cieuc = 0x3148
    SsangCieuc = 0x3149
    Chieuch = 0x314A
    Khieukh = 0x314B
    Thieuth = 0x314C
    Phieuph = 0x314D
    Hieuh = 0x314E

    @classmethod
    def from_char(cls, character: str) -> "Jaeum":
        """Resolve any modern consonant jamo to its compatibility letter.

        Accepts compatibility letters, halfwidth letters and conjoining
        initial/final jamo. Vowels raise `NonJaeumError`; anything else raises
        `NonJamoError`.
        """
        code = ord(character)
        if JAEUM_FIRST <= code <= JAEUM_LAST:
            return cls(code)
        if HALFWIDTH_JAEUM_FIRST <= code <= HALFWIDTH_JAEUM_LAST:
            return cls(code - _HALFWIDTH_JAEUM_OFFSET)
        if CHOSEONG_BASE <= code < CHOSEONG_BASE + len(Choseong):
            return cls.from_choseong(Choseong(code - CHOSEONG_BASE))
        if JONGSEONG_BASE < code <= JONGSEONG_BASE + len(Jongseong):
            return cls.from_jongseong(Jongseong(code - JONGSEONG_BASE))
        # Raises NonJamoError unless the character is at least a vowel
        Jungseong.from_char(character)
        raise NonJaeumError(character)

    @classmethod
    def from_choseong(cls, choseong: Choseong) -> "Jaeum":
        return cls[choseong.name]

    @classmethod
    def from_jongseong(cls, jongseong: Jongseong) -> "Jaeum":
        return cls[jongseong.name]

    def to_char(self) -> str:
        return chr(self.value)

    def to_choseong(self) -> Choseong:
        """Raises NotApplicableToChoseongError for clusters such as ㄳ."""
        choseong = Choseong.__members__.get(self.name)
        if choseong is None:
            raise NotApplicableToChoseongError(self)
        return choseong

    def to_jongseong(self) -> Jongseong:
        """Raises NotApplicableToJongseongError for ㄸ, ㅃ and ㅉ."""
        jongseong = Jongseong.__members__.get(self.name)
        if jongseong is None:
            raise NotApplicableToJongseongError(self)
        return jongseong

    def __str__(self) -> str:
        return self.to_char()

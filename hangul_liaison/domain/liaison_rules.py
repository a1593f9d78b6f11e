from __future__ import annotations

"""Rewrite rules for the liaison (연음) transforms.

Two ordered tables, one per direction. Lookup walks a table in order and the
first eligible rule wins. A rule flagged `extended` breaks phonetic
equivalence and is only eligible when the caller opts into the extended set.

IMPORTANT:
- This is DOMAIN DATA. The tables are never mutated at runtime.
- Order matters; keep new rules next to the final consonant they extend.
"""

from dataclasses import dataclass
from typing import Final, Optional

from hangul_liaison.domain.jamo import Choseong as C
from hangul_liaison.domain.jamo import Jongseong as J
from hangul_liaison.domain.jamo import Jungseong as V


@dataclass(frozen=True)
class PullupRule:
    """Current syllable ends in `trigger_final`, next starts with `trigger_initial`.

    The current final becomes `replacement_final` and the next initial
    becomes Ieung.
    """

    trigger_final: Optional[J]
    trigger_initial: C
    replacement_final: J
    extended: bool = False


@dataclass(frozen=True)
class PushdownRule:
    """Current syllable ends in `trigger_final`, next starts with Ieung.

    The current final becomes `replacement_final` (possibly none) and the next
    initial becomes `replacement_initial`.
    """

    trigger_final: J
    replacement_final: Optional[J]
    replacement_initial: C
    extended: bool = False


# -----------------------------------------------------------------------------
# Pull-up: the next initial consonant moves into the current final slot
# -----------------------------------------------------------------------------

PULLUP_RULES: Final[tuple[PullupRule, ...]] = (
    # --- open syllable takes the next initial as its final ---
    PullupRule(None, C.Kiyeok, J.Kiyeok),
    PullupRule(None, C.SsangKiyeok, J.SsangKiyeok),
    PullupRule(None, C.Nieun, J.Nieun),
    PullupRule(None, C.Tikeut, J.Tikeut),
    PullupRule(None, C.Rieul, J.Rieul),
    PullupRule(None, C.Mieum, J.Mieum),
    PullupRule(None, C.Pieup, J.Pieup),
    PullupRule(None, C.Sios, J.Sios),
    PullupRule(None, C.SsangSios, J.SsangSios),
    PullupRule(None, C.Cieuc, J.Cieuc),
    PullupRule(None, C.Chieuch, J.Chieuch),
    PullupRule(None, C.Khieukh, J.Khieukh),
    PullupRule(None, C.Thieuth, J.Thieuth),
    PullupRule(None, C.Phieuph, J.Phieuph),
    PullupRule(None, C.Hieuh, J.Hieuh, extended=True),

    # --- single final grows into a cluster ---
    PullupRule(J.Kiyeok, C.Kiyeok, J.SsangKiyeok, extended=True),
    PullupRule(J.Kiyeok, C.Sios, J.KiyeokSios),
    PullupRule(J.Nieun, C.Cieuc, J.NieunCieuc),
    PullupRule(J.Nieun, C.Hieuh, J.NieunHieuh, extended=True),
    PullupRule(J.Rieul, C.Kiyeok, J.RieulKiyeok),
    PullupRule(J.Rieul, C.Mieum, J.RieulMieum),
    PullupRule(J.Rieul, C.Pieup, J.RieulPieup),
    PullupRule(J.Rieul, C.Sios, J.RieulSios),
    PullupRule(J.Rieul, C.Thieuth, J.RieulThieuth),
    PullupRule(J.Rieul, C.Phieuph, J.RieulPhieuph),
    PullupRule(J.Rieul, C.Hieuh, J.RieulHieuh, extended=True),
    PullupRule(J.Pieup, C.Sios, J.PieupSios),
    PullupRule(J.Sios, C.Sios, J.SsangSios, extended=True),
)


# -----------------------------------------------------------------------------
# Push-down: the current final moves onto a following Ieung
# -----------------------------------------------------------------------------

PUSHDOWN_RULES: Final[tuple[PushdownRule, ...]] = (
    PushdownRule(J.Kiyeok, None, C.Kiyeok),
    PushdownRule(J.SsangKiyeok, None, C.SsangKiyeok),
    PushdownRule(J.KiyeokSios, J.Kiyeok, C.Sios),
    PushdownRule(J.Nieun, None, C.Nieun),
    PushdownRule(J.NieunCieuc, J.Nieun, C.Cieuc),
    PushdownRule(J.NieunHieuh, J.Nieun, C.Hieuh, extended=True),
    PushdownRule(J.Tikeut, None, C.Tikeut),
    PushdownRule(J.Rieul, None, C.Rieul),
    PushdownRule(J.RieulKiyeok, J.Rieul, C.Kiyeok),
    PushdownRule(J.RieulMieum, J.Rieul, C.Mieum),
    PushdownRule(J.RieulPieup, J.Rieul, C.Pieup),
    PushdownRule(J.RieulSios, J.Rieul, C.Sios),
    PushdownRule(J.RieulThieuth, J.Rieul, C.Thieuth),
    PushdownRule(J.RieulPhieuph, J.Rieul, C.Phieuph),
    PushdownRule(J.RieulHieuh, J.Rieul, C.Hieuh, extended=True),
    PushdownRule(J.Mieum, None, C.Mieum),
    PushdownRule(J.Pieup, None, C.Pieup),
    PushdownRule(J.PieupSios, J.Pieup, C.Sios),
    PushdownRule(J.Sios, None, C.Sios),
    PushdownRule(J.SsangSios, None, C.SsangSios),
    PushdownRule(J.Cieuc, None, C.Cieuc),
    PushdownRule(J.Chieuch, None, C.Chieuch),
    PushdownRule(J.Khieukh, None, C.Khieukh),
    PushdownRule(J.Thieuth, None, C.Thieuth),
    PushdownRule(J.Phieuph, None, C.Phieuph),
    PushdownRule(J.Hieuh, None, C.Hieuh, extended=True),
)


# ㄷ/ㅌ before these vowels palatalizes (해돋이 -> 해도지) instead of plain liaison
PALATALIZING_FINALS: Final[frozenset[J]] = frozenset({J.Tikeut, J.Thieuth})
PALATALIZING_VOWELS: Final[frozenset[V]] = frozenset({V.Ya, V.Yae, V.Yeo, V.Ye, V.Yo, V.Yu, V.I})


def find_pullup_rule(final: Optional[J], next_initial: C, extended: bool = False) -> Optional[PullupRule]:
    for rule in PULLUP_RULES:
        if rule.extended and not extended:
            continue
        if rule.trigger_final == final and rule.trigger_initial == next_initial:
            return rule
    return None


def find_pushdown_rule(final: Optional[J], next_initial: C, extended: bool = False) -> Optional[PushdownRule]:
    if next_initial != C.Ieung:
        return None
    for rule in PUSHDOWN_RULES:
        if rule.extended and not extended:
            continue
        if rule.trigger_final == final:
            return rule
    return None


def is_palatalization_pair(final: Optional[J], next_medial: V) -> bool:
    """True when push-down would skip over a ㄷ/ㅌ palatalization context."""
    return final in PALATALIZING_FINALS and next_medial in PALATALIZING_VOWELS

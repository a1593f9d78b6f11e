from __future__ import annotations

"""Liaison (연음) simulation over running text (domain layer).

Two single-pass transducers with one syllable of lookahead:

  - pull-up   : "초성 올려 쓰기" -> "촛엉 올려 쓱이"
                the next syllable's initial moves into the current final slot
  - push-down : "입울 밖은" -> "이불 바끈"
                the current final moves onto a following Ieung

Each pass carries one pending mutation for the next syllable. Characters that
are not precomposed syllables are copied through and leave the pending value
alone, so it survives until the next syllable is reached.

Every syllable maps to exactly one output syllable; output length always
equals input length.
"""

import logging
from typing import Optional

from hangul_liaison.domain.jamo import Choseong
from hangul_liaison.domain.liaison_rules import (
    find_pullup_rule,
    find_pushdown_rule,
    is_palatalization_pair,
)
from hangul_liaison.domain.syllable import Syllable, compose, decompose, is_korean_syllable

logger = logging.getLogger(__name__)


def _peek_syllable(text: str, index: int) -> Optional[Syllable]:
    """Decompose text[index] if it exists and is a syllable, else None."""
    if index < len(text) and is_korean_syllable(text[index]):
        return decompose(text[index])
    return None


# -----------------------------------------------------------------------------
# Pull-up
# -----------------------------------------------------------------------------

def pullup_with_options(text: str, extended: bool) -> str:
    """Pull each following initial consonant up into the preceding final slot.

    Args:
        text: any text; only precomposed syllables are rewritten
        extended: also apply the non-phonetic rules (ㅎ moves, doubled ㄱ/ㅅ)
    """
    out: list[str] = []
    pending_pull = False

    for index, ch in enumerate(text):
        if not is_korean_syllable(ch):
            out.append(ch)
            continue

        current = decompose(ch)
        if pending_pull:
            current = current.with_initial(Choseong.Ieung)
            pending_pull = False

        nxt = _peek_syllable(text, index + 1)
        if nxt is not None:
            rule = find_pullup_rule(current.final, nxt.initial, extended)
            if rule is not None:
                logger.debug("pullup %s%s: %s", ch, text[index + 1], rule)
                current = current.with_final(rule.replacement_final)
                pending_pull = True

        out.append(compose(current))

    return "".join(out)


def pullup(text: str) -> str:
    """Pull-up with the ordinary (phonetic) rules only."""
    return pullup_with_options(text, False)


# -----------------------------------------------------------------------------
# Push-down
# -----------------------------------------------------------------------------

def pushdown_with_options(text: str, extended: bool) -> str:
    """Push each final consonant down onto a following Ieung.

    A ㄷ/ㅌ final followed by ㅑ ㅒ ㅕ ㅖ ㅛ ㅠ ㅣ is left in place unless
    `extended` is set ("해돋이" stays, "돋아" becomes "도다").
    """
    out: list[str] = []
    pending_initial: Optional[Choseong] = None

    for index, ch in enumerate(text):
        if not is_korean_syllable(ch):
            out.append(ch)
            continue

        current = decompose(ch)
        if pending_initial is not None:
            current = current.with_initial(pending_initial)
            pending_initial = None

        nxt = _peek_syllable(text, index + 1)
        if nxt is not None:
            if not extended and is_palatalization_pair(current.final, nxt.medial):
                logger.debug("pushdown %s%s: palatalization context, skipped", ch, text[index + 1])
            else:
                rule = find_pushdown_rule(current.final, nxt.initial, extended)
                if rule is not None:
                    logger.debug("pushdown %s%s: %s", ch, text[index + 1], rule)
                    current = current.with_final(rule.replacement_final)
                    pending_initial = rule.replacement_initial

        out.append(compose(current))

    return "".join(out)


def pushdown(text: str) -> str:
    """Push-down with the ordinary (phonetic) rules only."""
    return pushdown_with_options(text, False)

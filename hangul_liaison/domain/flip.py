from __future__ import annotations

"""Horizontal initial/final flip, a wordplay transform.

The (initial, final) pairs of all syllables in the text are reversed end to
end while every vowel stays where it is:

    "아무말 대잔치" -> "차준다 맬마이"
"""

from hangul_liaison.domain.syllable import Syllable, compose, decompose, is_korean_syllable


def flip_horizontally(text: str) -> str:
    syllables = [decompose(ch) for ch in text if is_korean_syllable(ch)]
    consonants = [(s.initial, s.final) for s in reversed(syllables)]

    out: list[str] = []
    position = 0
    for ch in text:
        if not is_korean_syllable(ch):
            out.append(ch)
            continue
        initial, final = consonants[position]
        out.append(compose(Syllable(initial, syllables[position].medial, final)))
        position += 1

    return "".join(out)

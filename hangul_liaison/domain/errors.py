from __future__ import annotations

"""Error types raised by the Hangul domain layer.

Everything derives from `HangulError`, itself a `ValueError`, so callers that
only care about "bad input" can keep catching `ValueError`.
"""

from typing import Any


class HangulError(ValueError):
    """Base class for invalid Hangul input."""


class NonKoreanError(HangulError):
    """A character outside the precomposed syllable range (U+AC00..U+D7A3)."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__("%r is not a precomposed Korean syllable" % (character,))


class NonJamoError(HangulError):
    """A character that is not a modern Hangul jamo in any supported block."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__("%r is not a correct jamo character" % (character,))


class NonJaeumError(HangulError):
    """A jamo character that is a vowel where a consonant was expected."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__("%r is a vowel, not a consonant" % (character,))


class NotApplicableToChoseongError(HangulError):
    """A consonant that cannot sit in the initial consonant position."""

    def __init__(self, jaeum: Any) -> None:
        self.jaeum = jaeum
        super().__init__("%s cannot be used as an initial consonant" % (getattr(jaeum, "name", jaeum),))


class NotApplicableToJongseongError(HangulError):
    """A consonant that cannot sit in the final consonant position."""

    def __init__(self, jaeum: Any) -> None:
        self.jaeum = jaeum
        super().__init__("%s cannot be used as a final consonant" % (getattr(jaeum, "name", jaeum),))

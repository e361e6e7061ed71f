"""Phonetic distance between rhyme keys and the pair matchers built on it."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, Sequence, TYPE_CHECKING

from .phonemes import (
    VOWEL_CLASSES,
    consonants_equivalent,
    is_vowel,
    normalize_phone,
    vowel_family,
)
from .rhyme_key import NUCLEUS_SEPARATOR, RhymeKey

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grouping import RhymeSpan

NUCLEUS_WEIGHT = 0.7
CODA_WEIGHT = 0.3

_NUCLEUS_FINAL_VOWEL_MATCH = 0.05
_NUCLEUS_SAME_FAMILY = 0.25
_NUCLEUS_MISMATCH = 0.6

_CODA_ONE_EMPTY = 0.6
_CODA_LENGTH_PENALTY = 0.5
_CODA_MISMATCH_SCALE = 0.35

_POSITIONAL_CAP = 0.95


class MatchStrategy(str, Enum):
    """How candidate pairs are judged during grouping."""

    DISTANCE = "distance"
    POSITIONAL_SCORE = "positional-score"


def nucleus_distance(first: str, second: str) -> float:
    if first == second:
        return 0.0

    # Absorbed nuclei ("A+I") compare on their trailing vowel.
    a = first.split(NUCLEUS_SEPARATOR)[-1] or first
    b = second.split(NUCLEUS_SEPARATOR)[-1] or second
    if a == b:
        return _NUCLEUS_FINAL_VOWEL_MATCH
    if vowel_family(a) == vowel_family(b):
        return _NUCLEUS_SAME_FAMILY
    return _NUCLEUS_MISMATCH


def coda_distance(first: Sequence[str], second: Sequence[str]) -> float:
    if tuple(first) == tuple(second):
        return 0.0
    if not first or not second:
        return _CODA_ONE_EMPTY

    mismatches = 0.0
    for offset in range(1, min(len(first), len(second)) + 1):
        if not consonants_equivalent(first[-offset], second[-offset]):
            mismatches += 1

    mismatches += abs(len(first) - len(second)) * _CODA_LENGTH_PENALTY
    return min(1.0, mismatches * _CODA_MISMATCH_SCALE)


def rhyme_distance(first: RhymeKey, second: RhymeKey) -> float:
    """Weighted nucleus/coda distance; ``0.0`` is a perfect rhyme."""

    return NUCLEUS_WEIGHT * nucleus_distance(first.nucleus, second.nucleus) + CODA_WEIGHT * coda_distance(
        first.coda, second.coda
    )


def _same_vowel_family(first: str, second: str) -> bool:
    if not (is_vowel(first) and is_vowel(second)):
        return False
    return vowel_family(VOWEL_CLASSES[first]) == vowel_family(VOWEL_CLASSES[second])


def score_rhyme(tail1: Sequence[str], tail2: Sequence[str]) -> float:
    """Positional similarity of two rhyme tails, walking back from the end.

    Identical tails score ``1.0``. Otherwise an exact phoneme match at offset
    ``i`` from the end earns ``1/(i+1)`` and two vowels of one family earn
    ``0.5/(i+1)``; the sum is capped below a perfect score.
    """

    if not tail1 or not tail2:
        return 0.0

    base1 = [normalize_phone(phone) for phone in tail1]
    base2 = [normalize_phone(phone) for phone in tail2]
    if base1 == base2:
        return 1.0

    score = 0.0
    for offset in range(min(len(base1), len(base2))):
        p1 = base1[-1 - offset]
        p2 = base2[-1 - offset]
        if p1 == p2:
            score += 1.0 / (offset + 1)
        elif _same_vowel_family(p1, p2):
            score += 0.5 / (offset + 1)
    return min(_POSITIONAL_CAP, score)


class PairMatcher(Protocol):
    """Decides whether two rhyme spans belong together."""

    strategy: MatchStrategy

    def threshold_for(self, first_line_final: bool, second_line_final: bool) -> float:
        ...

    @property
    def internal_threshold(self) -> float:
        ...

    def match(self, first: "RhymeSpan", second: "RhymeSpan", threshold: float) -> Optional[float]:
        """Return the pair's distance when it matches at ``threshold``."""
        ...


class DistanceMatcher:
    """Combined nucleus/coda distance with position-sensitive thresholds."""

    strategy = MatchStrategy.DISTANCE

    def __init__(self, perfect_threshold: float, slant_threshold: float) -> None:
        self.perfect_threshold = perfect_threshold
        self.slant_threshold = slant_threshold

    def threshold_for(self, first_line_final: bool, second_line_final: bool) -> float:
        if first_line_final and second_line_final:
            return self.perfect_threshold
        if first_line_final or second_line_final:
            return (self.perfect_threshold + self.slant_threshold) / 2
        return self.slant_threshold

    @property
    def internal_threshold(self) -> float:
        return self.slant_threshold

    def match(self, first: "RhymeSpan", second: "RhymeSpan", threshold: float) -> Optional[float]:
        distance = rhyme_distance(first.key, second.key)
        return distance if distance <= threshold else None


class PositionalMatcher:
    """Tail scoring from the minimal engine; one threshold for every position."""

    strategy = MatchStrategy.POSITIONAL_SCORE

    def __init__(self, minimum_score: float) -> None:
        self.minimum_score = minimum_score

    def threshold_for(self, first_line_final: bool, second_line_final: bool) -> float:
        return self.minimum_score

    @property
    def internal_threshold(self) -> float:
        return self.minimum_score

    def match(self, first: "RhymeSpan", second: "RhymeSpan", threshold: float) -> Optional[float]:
        score = score_rhyme(first.tail_phones, second.tail_phones)
        return 1.0 - score if score >= threshold else None


__all__ = [
    "NUCLEUS_WEIGHT",
    "CODA_WEIGHT",
    "MatchStrategy",
    "nucleus_distance",
    "coda_distance",
    "rhyme_distance",
    "score_rhyme",
    "PairMatcher",
    "DistanceMatcher",
    "PositionalMatcher",
]

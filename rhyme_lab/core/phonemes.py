"""Static ARPABET tables shared by every stage of the rhyme pipeline."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

VOWEL_PHONEMES: FrozenSet[str] = frozenset(
    {
        "AA",
        "AE",
        "AH",
        "AO",
        "AW",
        "AY",
        "EH",
        "ER",
        "EY",
        "IH",
        "IY",
        "OW",
        "OY",
        "UH",
        "UW",
    }
)

# Phonetically close vowels share a nucleus label; the labels are what rhyme
# keys and assonance compare.
VOWEL_CLASSES: Mapping[str, str] = MappingProxyType(
    {
        "IY": "EE",
        "IH": "I",
        "EH": "E",
        "AE": "A",
        "AA": "AH",
        "AH": "UH",
        "AO": "OR",
        "OW": "O",
        "UH": "U",
        "UW": "OO",
        "EY": "AY",
        "AY": "EYE",
        "OY": "OY",
        "AW": "OW",
        "ER": "ER",
    }
)

VOWEL_FAMILIES: Tuple[FrozenSet[str], ...] = (
    frozenset({"EE", "I", "E"}),  # front
    frozenset({"A", "AH", "ER", "UH"}),  # central
    frozenset({"O", "OR", "OO", "U"}),  # back
    frozenset({"EYE", "OW", "OY", "AY"}),  # diphthongs
)
UNKNOWN_FAMILY = 9

CONSONANT_PAIRS: Tuple[Tuple[str, str], ...] = (
    ("S", "Z"),
    ("F", "V"),
    ("T", "D"),
    ("K", "G"),
    ("P", "B"),
    ("SH", "ZH"),
    ("CH", "JH"),
    ("TH", "DH"),
    ("M", "N"),
)


def _build_equivalence(pairs: Tuple[Tuple[str, str], ...]) -> Mapping[str, FrozenSet[str]]:
    equivalence: Dict[str, set[str]] = {}
    for first, second in pairs:
        equivalence.setdefault(first, set()).add(second)
        equivalence.setdefault(second, set()).add(first)
    return MappingProxyType({key: frozenset(value) for key, value in equivalence.items()})


CONSONANT_EQUIVALENCE: Mapping[str, FrozenSet[str]] = _build_equivalence(CONSONANT_PAIRS)

# Voiced consonants fold onto their voiceless partner in rhyme codas.
VOICING_FOLD: Mapping[str, str] = MappingProxyType(
    {
        "Z": "S",
        "V": "F",
        "D": "T",
        "G": "K",
        "B": "P",
        "ZH": "SH",
        "JH": "CH",
        "DH": "TH",
    }
)

STOP_WORDS: FrozenSet[str] = frozenset(
    {
        "the", "and", "a", "an", "in", "on", "of", "is", "to", "for", "with",
        "that", "this", "these", "those", "are", "be", "i", "you", "he", "she",
        "it", "we", "they", "at", "from", "as", "by", "or", "if", "then", "but",
        "my", "me", "your", "our", "their", "his", "her", "im", "i'm", "ya",
        "'em", "em", "ain't", "aint", "uh", "yeah",
    }
)

_DIGIT_PATTERN = re.compile(r"\d")


def normalize_phone(phone: str) -> str:
    """Strip stress digits from ``phone``."""

    return _DIGIT_PATTERN.sub("", phone or "")


def is_vowel(phone: str) -> bool:
    return normalize_phone(phone) in VOWEL_PHONEMES


def stress_of(phone: str) -> Optional[str]:
    """Return the stress digit carried by a vowel phoneme, if any."""

    match = _DIGIT_PATTERN.search(phone or "")
    return match.group(0) if match else None


def vowel_class(vowel: str) -> str:
    base = normalize_phone(vowel)
    return VOWEL_CLASSES.get(base, base)


def vowel_family(label: str) -> int:
    """Return the index of the family containing nucleus ``label``."""

    for index, family in enumerate(VOWEL_FAMILIES):
        if label in family:
            return index
    return UNKNOWN_FAMILY


def consonants_equivalent(first: str, second: str) -> bool:
    if first == second:
        return True
    return second in CONSONANT_EQUIVALENCE.get(first, frozenset())


__all__ = [
    "VOWEL_PHONEMES",
    "VOWEL_CLASSES",
    "VOWEL_FAMILIES",
    "UNKNOWN_FAMILY",
    "CONSONANT_PAIRS",
    "CONSONANT_EQUIVALENCE",
    "VOICING_FOLD",
    "STOP_WORDS",
    "normalize_phone",
    "is_vowel",
    "stress_of",
    "vowel_class",
    "vowel_family",
    "consonants_equivalent",
]

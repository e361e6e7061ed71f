"""Heuristic grapheme-to-phoneme conversion for words outside the dictionary."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from .dictionary import DEFAULT_DICTIONARY, PhonemeDictionary, Pronunciation
from .phonemes import is_vowel

# Ordered longest/most specific first; the first pattern that matches wins.
VOWEL_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("eigh", "EY"),
    ("ough", "AO"),
    ("augh", "AO"),
    ("eau", "OW"),
    ("igh", "AY"),
    ("oi", "OY"),
    ("oy", "OY"),
    ("ow", "AW"),
    ("ou", "AW"),
    ("ai", "EY"),
    ("ay", "EY"),
    ("ey", "EY"),
    ("ea", "IY"),
    ("ee", "IY"),
    ("ie", "IY"),
    ("oa", "OW"),
    ("oo", "UW"),
    ("eu", "UW"),
    ("au", "AO"),
    ("aw", "AO"),
    ("ur", "ER"),
    ("ir", "ER"),
    ("er", "ER"),
    ("ar", "AA"),
    ("or", "AO"),
)

CONSONANT_DIGRAPHS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("ch", ("CH",)),
    ("sh", ("SH",)),
    ("th", ("TH",)),
    ("ph", ("F",)),
    ("wh", ("W",)),
    ("gh", ("G",)),
    ("ng", ("NG",)),
    ("qu", ("K", "W")),
    ("ck", ("K",)),
    ("kn", ("N",)),
    ("wr", ("R",)),
    ("ps", ("S",)),
)

SIMPLE_VOWELS = {"a": "AE", "e": "EH", "i": "IH", "o": "AO", "u": "AH", "y": "IH"}

CONSONANT_MAP = {
    "b": "B",
    "c": "K",
    "d": "D",
    "f": "F",
    "g": "G",
    "h": "HH",
    "j": "JH",
    "k": "K",
    "l": "L",
    "m": "M",
    "n": "N",
    "p": "P",
    "q": "K",
    "r": "R",
    "s": "S",
    "t": "T",
    "v": "V",
    "w": "W",
    "x": "K",
    "z": "Z",
}

_NON_WORD_PATTERN = re.compile(r"[^\w']")


def clean_word(word: str) -> str:
    """Lowercase ``word`` and drop punctuation other than apostrophes."""

    return _NON_WORD_PATTERN.sub("", (word or "").lower()).strip()


def _collapse_repeated_consonants(phones: List[str]) -> List[str]:
    result: List[str] = []
    for phone in phones:
        if not phone:
            continue
        if result and result[-1] == phone and not is_vowel(phone):
            continue
        result.append(phone)
    return result


def convert(word: str) -> Pronunciation:
    """Approximate the ARPABET pronunciation of ``word``.

    Primary stress goes on the first vowel and every later vowel is marked
    unstressed. A word without vowel letters yields consonants only.
    """

    lower = (word or "").lower()
    phones: List[str] = []
    stressed = False
    i = 0

    def _vowel(phoneme: str) -> str:
        nonlocal stressed
        marker = "0" if stressed else "1"
        stressed = True
        return phoneme + marker

    while i < len(lower):
        for pattern, phoneme in VOWEL_PATTERNS:
            if lower.startswith(pattern, i):
                phones.append(_vowel(phoneme))
                i += len(pattern)
                break
        else:
            for digraph, digraph_phones in CONSONANT_DIGRAPHS:
                if lower.startswith(digraph, i):
                    phones.extend(digraph_phones)
                    i += len(digraph)
                    break
            else:
                char = lower[i]
                if char in SIMPLE_VOWELS:
                    phones.append(_vowel(SIMPLE_VOWELS[char]))
                elif char in CONSONANT_MAP:
                    phones.append(CONSONANT_MAP[char])
                i += 1

    return tuple(_collapse_repeated_consonants(phones))


def word_to_phones(word: str, dictionary: Optional[PhonemeDictionary] = None) -> Pronunciation:
    """Return the dictionary pronunciation for ``word`` or a G2P estimate."""

    cleaned = clean_word(word)
    table = dictionary if dictionary is not None else DEFAULT_DICTIONARY
    curated = table.lookup(cleaned)
    if curated is not None:
        return curated
    return convert(cleaned)


__all__ = [
    "VOWEL_PATTERNS",
    "CONSONANT_DIGRAPHS",
    "SIMPLE_VOWELS",
    "CONSONANT_MAP",
    "clean_word",
    "convert",
    "word_to_phones",
]

"""Rhyme keys: the nucleus and coda that two words are compared on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from .phonemes import VOICING_FOLD, is_vowel, normalize_phone, vowel_class
from .syllables import Syllable

NUCLEUS_SEPARATOR = "+"

# Codas too slight to characterise a rhyme on their own.
WEAK_CODAS: FrozenSet[Tuple[str, ...]] = frozenset(
    {("S",), ("Z",), ("R",), ("L",), ("T",), ("D",), ("N",), ("M",)}
)


@dataclass(frozen=True)
class RhymeKey:
    """Vowel-class nucleus label plus normalized coda consonants."""

    nucleus: str
    coda: Tuple[str, ...] = ()

    @property
    def final_vowel(self) -> str:
        """Trailing nucleus component of an absorbed (compound) nucleus."""

        return self.nucleus.split(NUCLEUS_SEPARATOR)[-1] or self.nucleus

    def as_text(self) -> str:
        return " ".join((self.nucleus, *self.coda))


def _nucleus_and_coda(syllable: Syllable) -> Tuple[Optional[str], List[str]]:
    nucleus: Optional[str] = None
    coda: List[str] = []
    for phone in syllable.phones:
        if is_vowel(phone):
            nucleus = vowel_class(phone)
        elif nucleus is not None:
            coda.append(normalize_phone(phone))
    return nucleus, coda


def _is_weak(coda: Sequence[str]) -> bool:
    return len(coda) <= 1 or tuple(coda) in WEAK_CODAS


def normalize_coda(coda: Iterable[str]) -> Tuple[str, ...]:
    """Fold voicing and drop a trailing aspirate."""

    folded = [VOICING_FOLD.get(normalize_phone(phone), normalize_phone(phone)) for phone in coda]
    if folded and folded[-1] == "HH":
        folded.pop()
    return tuple(folded)


def extract_rhyme_key(
    syllables: Sequence[Syllable],
    stress_index: Optional[int],
) -> Optional[RhymeKey]:
    """Derive the rhyme key of a syllabified word.

    The stressed syllable supplies the nucleus and coda; onsets never count.
    A weak coda pulls in the preceding syllable: its nucleus label is joined
    in front with ``+`` and its coda is prepended.
    """

    if not syllables:
        return None

    index = stress_index if stress_index is not None else len(syllables) - 1
    index = max(0, min(index, len(syllables) - 1))

    nucleus, coda = _nucleus_and_coda(syllables[index])
    final_nucleus = nucleus
    final_coda = list(coda)

    if _is_weak(coda) and index > 0:
        previous_nucleus, previous_coda = _nucleus_and_coda(syllables[index - 1])
        if previous_nucleus:
            final_nucleus = f"{previous_nucleus}{NUCLEUS_SEPARATOR}{nucleus or ''}"
        final_coda = previous_coda + coda

    if not final_nucleus:
        return None
    return RhymeKey(final_nucleus, normalize_coda(final_coda))


def multisyllabic_key(syllables: Sequence[Syllable], tail: int) -> Optional[str]:
    """Join every phoneme of the last ``tail`` syllables into one string."""

    if not syllables or tail <= 0:
        return None

    span = min(tail, len(syllables))
    parts: List[str] = []
    for syllable in syllables[len(syllables) - span :]:
        for phone in syllable.phones:
            parts.append(vowel_class(phone) if is_vowel(phone) else normalize_phone(phone))
    return "-".join(parts) if parts else None


def rhyme_tail(phones: Sequence[str]) -> Tuple[str, ...]:
    """Phonemes from the last vowel to the end of the word."""

    for index in range(len(phones) - 1, -1, -1):
        if is_vowel(phones[index]):
            return tuple(phones[index:])
    return tuple(phones[-2:])


def stressed_vowel_label(
    syllables: Sequence[Syllable],
    stress_index: Optional[int],
) -> Optional[str]:
    """Nucleus label of the stressed syllable, used for assonance."""

    if not syllables:
        return None
    index = stress_index if stress_index is not None else len(syllables) - 1
    if not 0 <= index < len(syllables):
        return None
    vowel = syllables[index].vowel
    return vowel_class(vowel) if vowel else None


__all__ = [
    "NUCLEUS_SEPARATOR",
    "WEAK_CODAS",
    "RhymeKey",
    "normalize_coda",
    "extract_rhyme_key",
    "multisyllabic_key",
    "rhyme_tail",
    "stressed_vowel_label",
]

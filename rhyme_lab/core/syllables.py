"""Split phoneme sequences into syllables and locate the stressed one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .phonemes import is_vowel, normalize_phone


@dataclass(frozen=True)
class Syllable:
    """A run of phonemes built around exactly one vowel."""

    phones: Tuple[str, ...]

    @property
    def vowel(self) -> str:
        for phone in self.phones:
            if is_vowel(phone):
                return phone
        return ""

    @property
    def vowel_index(self) -> int:
        for index, phone in enumerate(self.phones):
            if is_vowel(phone):
                return index
        return -1

    @property
    def coda(self) -> Tuple[str, ...]:
        """Consonants after the vowel, stress digits stripped."""

        index = self.vowel_index
        if index < 0:
            return ()
        return tuple(normalize_phone(phone) for phone in self.phones[index + 1 :])


def syllabify(phones: Iterable[str]) -> Tuple[Tuple[Syllable, ...], Optional[int]]:
    """Return the syllables of ``phones`` and the index of the stressed one.

    Every vowel opens a new syllable. Consonants preceding the first vowel and
    consonants following any vowel belong to the syllable being built. When no
    vowel carries primary stress the final syllable is treated as stressed.
    """

    syllables: List[Tuple[str, ...]] = []
    onset: List[str] = []
    current: Optional[List[str]] = None
    stress_index: Optional[int] = None

    for phone in phones:
        if not phone:
            continue
        if is_vowel(phone):
            if current is not None:
                syllables.append(tuple(current))
                current = [phone]
            else:
                current = onset + [phone]
            if stress_index is None and phone.endswith("1"):
                stress_index = len(syllables)
        elif current is None:
            onset.append(phone)
        else:
            current.append(phone)

    if current is not None:
        syllables.append(tuple(current))

    if stress_index is None and syllables:
        stress_index = len(syllables) - 1

    return tuple(Syllable(entry) for entry in syllables), stress_index


__all__ = ["Syllable", "syllabify"]

"""Curated pronunciations for slang and contractions the G2P rules mishandle."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

Pronunciation = Tuple[str, ...]

_SLANG_ENTRIES: Dict[str, Sequence[str]] = {
    "ya": ["Y", "AA1"],
    "yall": ["Y", "AO1", "L"],
    "y'all": ["Y", "AO1", "L"],
    "gon": ["G", "AA1", "N"],
    "gonna": ["G", "AH1", "N", "AH0"],
    "wanna": ["W", "AA1", "N", "AH0"],
    "bru": ["B", "R", "UW1"],
    "'em": ["AH0", "M"],
    "em": ["AH0", "M"],
    "lekker": ["L", "EH1", "K", "ER0"],
    "kak": ["K", "AA1", "K"],
    "finna": ["F", "IH1", "N", "AH0"],
    "tryna": ["T", "R", "AY1", "N", "AH0"],
    "boutta": ["B", "AW1", "T", "AH0"],
    "hella": ["HH", "EH1", "L", "AH0"],
    "ayy": ["EY1"],
    "bruh": ["B", "R", "AH1"],
    "nah": ["N", "AA1"],
    "aight": ["AY1", "T"],
    "yo": ["Y", "OW1"],
    "wassup": ["W", "AH1", "S", "AH0", "P"],
    "whatchu": ["W", "AH1", "CH", "UW0"],
    "cuz": ["K", "AH1", "Z"],
    "homie": ["HH", "OW1", "M", "IY0"],
    "thru": ["TH", "R", "UW1"],
    "tho": ["DH", "OW1"],
    "ain't": ["EY1", "N", "T"],
}

# Dropped-g participles written with and without the apostrophe.
_CONTRACTION_ENTRIES: Dict[str, Sequence[str]] = {
    "playin'": ["P", "L", "EY1", "IH0", "N"],
    "playin": ["P", "L", "EY1", "IH0", "N"],
    "puttin'": ["P", "UH1", "T", "IH0", "N"],
    "puttin": ["P", "UH1", "T", "IH0", "N"],
    "messin'": ["M", "EH1", "S", "IH0", "N"],
    "messin": ["M", "EH1", "S", "IH0", "N"],
    "comin'": ["K", "AH1", "M", "IH0", "N"],
    "comin": ["K", "AH1", "M", "IH0", "N"],
    "swimmin'": ["S", "W", "IH1", "M", "IH0", "N"],
    "swimmin": ["S", "W", "IH1", "M", "IH0", "N"],
    "sittin'": ["S", "IH1", "T", "IH0", "N"],
    "sittin": ["S", "IH1", "T", "IH0", "N"],
}

_HIPHOP_ENTRIES: Dict[str, Sequence[str]] = {
    "orange": ["AO1", "R", "IH0", "N", "JH"],
    "doorhinge": ["D", "AO1", "R", "HH", "IH0", "N", "JH"],
    "fourinch": ["F", "AO1", "R", "IH0", "N", "CH"],
    "syringe": ["S", "ER0", "IH1", "N", "JH"],
    "playa": ["P", "L", "EY1", "AH0"],
    "gangsta": ["G", "AE1", "NG", "S", "T", "AH0"],
    "hustla": ["HH", "AH1", "S", "L", "AH0"],
    "baller": ["B", "AO1", "L", "ER0"],
    "realest": ["R", "IY1", "L", "IH0", "S", "T"],
    "illest": ["IH1", "L", "IH0", "S", "T"],
    "dopest": ["D", "OW1", "P", "IH0", "S", "T"],
    "villain": ["V", "IH1", "L", "AH0", "N"],
    "chillin": ["CH", "IH1", "L", "IH0", "N"],
    "illin": ["IH1", "L", "IH0", "N"],
    "spillin": ["S", "P", "IH1", "L", "IH0", "N"],
    "choppa": ["CH", "AA1", "P", "AH0"],
    "poppa": ["P", "AA1", "P", "AH0"],
    "stoppa": ["S", "T", "AA1", "P", "AH0"],
    "foshizzle": ["F", "AO1", "SH", "IH1", "Z", "AH0", "L"],
    "nizzle": ["N", "IH1", "Z", "AH0", "L"],
    "dizzle": ["D", "IH1", "Z", "AH0", "L"],
    "bizzle": ["B", "IH1", "Z", "AH0", "L"],
    "microphone": ["M", "AY1", "K", "R", "AH0", "F", "OW2", "N"],
    "cyclone": ["S", "AY1", "K", "L", "OW2", "N"],
    "milestone": ["M", "AY1", "L", "S", "T", "OW2", "N"],
    "whatup": ["W", "AH1", "T", "AH0", "P"],
    "holup": ["HH", "OW1", "L", "AH0", "P"],
    "hinge": ["HH", "IH1", "N", "JH"],
    "door": ["D", "AO1", "R"],
    "four": ["F", "AO1", "R"],
    "more": ["M", "AO1", "R"],
    "store": ["S", "T", "AO1", "R"],
    "turnt": ["T", "ER1", "N", "T"],
    "crunk": ["K", "R", "AH1", "NG", "K"],
    "trill": ["T", "R", "IH1", "L"],
    "swag": ["S", "W", "AE1", "G"],
    "dope": ["D", "OW1", "P"],
    "whack": ["W", "AE1", "K"],
    "phat": ["F", "AE1", "T"],
    "lit": ["L", "IH1", "T"],
    "fire": ["F", "AY1", "ER0"],
    "bars": ["B", "AA1", "R", "Z"],
    "spittin": ["S", "P", "IH1", "T", "IH0", "N"],
    "flowin": ["F", "L", "OW1", "IH0", "N"],
    "ballin": ["B", "AO1", "L", "IH0", "N"],
    "stackin": ["S", "T", "AE1", "K", "IH0", "N"],
    "grindin": ["G", "R", "AY1", "N", "D", "IH0", "N"],
}


def _freeze(entries: Mapping[str, Iterable[str]]) -> Dict[str, Pronunciation]:
    frozen: Dict[str, Pronunciation] = {}
    for word, phones in entries.items():
        key = (word or "").strip().lower()
        if not key:
            continue
        pronunciation = tuple(str(phone).strip().upper() for phone in phones if phone)
        if pronunciation:
            frozen[key] = pronunciation
    return frozen


class PhonemeDictionary:
    """Exact-match pronunciation table consulted before the G2P rules."""

    def __init__(self, entries: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        self._entries: Mapping[str, Pronunciation] = MappingProxyType(_freeze(entries or {}))

    def lookup(self, word: str) -> Optional[Pronunciation]:
        """Return the curated pronunciation for ``word`` or ``None``."""

        if not word:
            return None
        return self._entries.get(word.strip().lower())

    def extended(self, entries: Mapping[str, Iterable[str]]) -> "PhonemeDictionary":
        """Return a new dictionary with ``entries`` layered over this one."""

        merged: Dict[str, Iterable[str]] = dict(self._entries)
        merged.update(entries)
        return PhonemeDictionary(merged)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


DEFAULT_DICTIONARY = PhonemeDictionary(
    {**_SLANG_ENTRIES, **_CONTRACTION_ENTRIES, **_HIPHOP_ENTRIES}
)


def lookup(word: str) -> Optional[Pronunciation]:
    """Look ``word`` up in the default exception table."""

    return DEFAULT_DICTIONARY.lookup(word)


__all__ = ["Pronunciation", "PhonemeDictionary", "DEFAULT_DICTIONARY", "lookup"]

"""Split text into phonetically annotated word tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Tuple

from .dictionary import PhonemeDictionary
from .g2p import clean_word, word_to_phones
from .phonemes import STOP_WORDS
from .syllables import Syllable, syllabify

TOKEN_PATTERN = re.compile(r"[A-Za-z']+")
SHORT_STOP_WORD_LENGTH = 2


@dataclass(frozen=True)
class WordToken:
    """A word occurrence with its offsets and derived pronunciation."""

    index: int
    text: str
    normalized: str
    line: int
    start: int
    end: int
    phones: Tuple[str, ...]
    syllables: Tuple[Syllable, ...]
    stress_index: Optional[int]

    @property
    def syllable_count(self) -> int:
        return len(self.syllables)

    @property
    def is_stop_word(self) -> bool:
        return self.normalized in STOP_WORDS


def split_lines(text: str) -> Tuple[str, ...]:
    return tuple((text or "").split("\n"))


def iter_tokens(
    text: str,
    *,
    dictionary: Optional[PhonemeDictionary] = None,
    skip_short_stop_words: bool = True,
) -> Iterator[WordToken]:
    """Yield annotated tokens for every letter/apostrophe run in ``text``.

    Offsets index into ``text`` itself. Stop words of one or two letters are
    skipped unless ``skip_short_stop_words`` is false.
    """

    index = 0
    line_offset = 0
    for line_number, line in enumerate(split_lines(text)):
        for match in TOKEN_PATTERN.finditer(line):
            surface = match.group(0)
            normalized = clean_word(surface)
            if not normalized.strip("'"):
                continue
            if (
                skip_short_stop_words
                and normalized in STOP_WORDS
                and len(normalized) <= SHORT_STOP_WORD_LENGTH
            ):
                continue

            phones = word_to_phones(normalized, dictionary)
            syllables, stress_index = syllabify(phones)
            yield WordToken(
                index=index,
                text=surface,
                normalized=normalized,
                line=line_number,
                start=line_offset + match.start(),
                end=line_offset + match.end(),
                phones=phones,
                syllables=syllables,
                stress_index=stress_index,
            )
            index += 1
        line_offset += len(line) + 1


def tokenize(
    text: str,
    *,
    dictionary: Optional[PhonemeDictionary] = None,
    skip_short_stop_words: bool = True,
    max_words: Optional[int] = None,
) -> Tuple[WordToken, ...]:
    """Materialise :func:`iter_tokens`, keeping at most ``max_words`` tokens."""

    tokens = iter_tokens(text, dictionary=dictionary, skip_short_stop_words=skip_short_stop_words)
    if max_words is not None:
        tokens = islice(tokens, max_words)
    return tuple(tokens)


__all__ = ["TOKEN_PATTERN", "WordToken", "split_lines", "iter_tokens", "tokenize"]

"""Greedy rhyme, assonance and internal-rhyme grouping over a word list.

Grouping is a single pass in document order: the earliest unassigned word
claims every later unassigned word that matches it, and claimed words are
never reconsidered. The result depends on order and is not a global
clustering optimum.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .phonemes import vowel_family
from .rhyme_key import (
    RhymeKey,
    extract_rhyme_key,
    multisyllabic_key,
    rhyme_tail,
    stressed_vowel_label,
)
from .scorer import PairMatcher
from .tokenizer import WordToken

MULTISYLLABIC_TAILS: Tuple[int, ...] = (3, 2)
MIN_RHYME_GROUP_SIZE = 2
MIN_ASSONANCE_GROUP_SIZE = 3

KIND_PERFECT = "perfect"
KIND_SLANT = "slant"
KIND_MULTISYLLABIC = "multisyllabic"

WordPair = Tuple[int, int]


@dataclass(frozen=True)
class RhymeSpan:
    """Rhyme-relevant view of one word that has a rhyme key."""

    word_index: int
    line: int
    normalized: str
    key: RhymeKey
    tail: int
    multi_keys: Tuple[Tuple[int, str], ...]
    tail_phones: Tuple[str, ...]
    line_final: bool

    def multi_key(self, tail: int) -> Optional[str]:
        for size, value in self.multi_keys:
            if size == tail:
                return value
        return None


@dataclass(frozen=True)
class RhymeGroup:
    group_id: int
    members: Tuple[RhymeSpan, ...]
    kind: str

    @property
    def word_indices(self) -> Tuple[int, ...]:
        return tuple(member.word_index for member in self.members)


@dataclass(frozen=True)
class AssonanceGroup:
    group_id: int
    word_indices: Tuple[int, ...]
    vowel: str


def is_line_final(words: Sequence[WordToken], position: int) -> bool:
    """True when no later analysed word shares the word's line."""

    following = position + 1
    return following >= len(words) or words[following].line != words[position].line


def build_spans(words: Sequence[WordToken]) -> Tuple[RhymeSpan, ...]:
    spans: List[RhymeSpan] = []
    for position, word in enumerate(words):
        key = extract_rhyme_key(word.syllables, word.stress_index)
        if key is None:
            continue

        count = len(word.syllables)
        stress_index = word.stress_index if word.stress_index is not None else count - 1
        multi_keys = []
        for tail in range(2, min(4, count + 1)):
            value = multisyllabic_key(word.syllables, tail)
            if value:
                multi_keys.append((tail, value))

        spans.append(
            RhymeSpan(
                word_index=word.index,
                line=word.line,
                normalized=word.normalized,
                key=key,
                tail=max(1, count - stress_index),
                multi_keys=tuple(multi_keys),
                tail_phones=rhyme_tail(word.phones),
                line_final=is_line_final(words, position),
            )
        )
    return tuple(spans)


def _multisyllabic_match(first: RhymeSpan, second: RhymeSpan) -> bool:
    for tail in MULTISYLLABIC_TAILS:
        first_key = first.multi_key(tail)
        if first_key is not None and first_key == second.multi_key(tail):
            return True
    return False


def group_rhymes(spans: Sequence[RhymeSpan], matcher: PairMatcher) -> Tuple[RhymeGroup, ...]:
    """Cluster ``spans`` into rhyme groups of at least two words."""

    groups: List[RhymeGroup] = []
    used = [False] * len(spans)

    for i, seed in enumerate(spans):
        if used[i]:
            continue
        used[i] = True
        members = [seed]
        claimed = {seed.normalized}
        distances: List[float] = []
        bypassed = False

        for j in range(i + 1, len(spans)):
            if used[j]:
                continue
            candidate = spans[j]
            if candidate.normalized in claimed:
                continue

            if _multisyllabic_match(seed, candidate):
                members.append(candidate)
                claimed.add(candidate.normalized)
                used[j] = True
                bypassed = True
                continue

            threshold = matcher.threshold_for(seed.line_final, candidate.line_final)
            distance = matcher.match(seed, candidate, threshold)
            if distance is not None:
                members.append(candidate)
                claimed.add(candidate.normalized)
                distances.append(distance)
                used[j] = True

        if len(members) < MIN_RHYME_GROUP_SIZE:
            continue
        if bypassed:
            kind = KIND_MULTISYLLABIC
        elif all(distance == 0.0 for distance in distances):
            kind = KIND_PERFECT
        else:
            kind = KIND_SLANT
        groups.append(RhymeGroup(group_id=len(groups), members=tuple(members), kind=kind))

    return tuple(groups)


def group_assonance(words: Sequence[WordToken], first_group_id: int = 0) -> Tuple[AssonanceGroup, ...]:
    """Group non-stop-words whose stressed vowels share a label or family."""

    labels = [stressed_vowel_label(word.syllables, word.stress_index) for word in words]
    used = [False] * len(words)
    groups: List[AssonanceGroup] = []

    for i, seed in enumerate(words):
        if used[i] or seed.is_stop_word:
            continue
        used[i] = True
        seed_label = labels[i]
        members = [seed.index]

        for j in range(i + 1, len(words)):
            candidate = words[j]
            if used[j] or candidate.is_stop_word or candidate.normalized == seed.normalized:
                continue
            label = labels[j]
            if seed_label is None or label is None:
                continue
            if label == seed_label or vowel_family(label) == vowel_family(seed_label):
                members.append(candidate.index)
                used[j] = True

        if len(members) >= MIN_ASSONANCE_GROUP_SIZE and seed_label is not None:
            groups.append(
                AssonanceGroup(
                    group_id=first_group_id + len(groups),
                    word_indices=tuple(members),
                    vowel=seed_label,
                )
            )

    return tuple(groups)


def find_internal_rhymes(
    spans: Sequence[RhymeSpan],
    matcher: PairMatcher,
) -> Dict[int, Tuple[WordPair, ...]]:
    """Return same-line rhyming word pairs keyed by line number."""

    by_line: Dict[int, List[RhymeSpan]] = {}
    for span in spans:
        by_line.setdefault(span.line, []).append(span)

    threshold = matcher.internal_threshold
    internal: Dict[int, Tuple[WordPair, ...]] = {}
    for line in sorted(by_line):
        line_spans = by_line[line]
        pairs: List[WordPair] = []
        for i, first in enumerate(line_spans):
            for second in line_spans[i + 1 :]:
                if first.normalized == second.normalized:
                    continue
                if matcher.match(first, second, threshold) is not None:
                    pairs.append((first.word_index, second.word_index))
        if pairs:
            internal[line] = tuple(pairs)
    return internal


__all__ = [
    "MULTISYLLABIC_TAILS",
    "MIN_RHYME_GROUP_SIZE",
    "MIN_ASSONANCE_GROUP_SIZE",
    "KIND_PERFECT",
    "KIND_SLANT",
    "KIND_MULTISYLLABIC",
    "RhymeSpan",
    "RhymeGroup",
    "AssonanceGroup",
    "is_line_final",
    "build_spans",
    "group_rhymes",
    "group_assonance",
    "find_internal_rhymes",
]

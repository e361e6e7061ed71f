"""Aggregate rhyme statistics and the letter-coded end-rhyme scheme."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from .grouping import AssonanceGroup, RhymeGroup
from .tokenizer import WordToken

MEMBERSHIP_RHYME = "rhyme"
MEMBERSHIP_ASSONANCE = "assonance"
NO_RHYME_MARK = "-"


@dataclass(frozen=True)
class GroupMembership:
    group_id: int
    tail: int
    type: str


@dataclass(frozen=True)
class RhymeMetrics:
    total_syllables: int = 0
    rhyming_syllables: int = 0
    density: float = 0.0
    multi_ratio: float = 0.0
    avg_per_line: float = 0.0
    scheme: str = ""
    rhyme_types: Mapping[str, int] = field(default_factory=dict)
    group_kinds: Mapping[str, int] = field(default_factory=dict)
    unique_rhyme_groups: int = 0
    unique_assonance_groups: int = 0


WordIndex = Dict[int, Tuple[GroupMembership, ...]]


def build_word_index(
    groups: Sequence[RhymeGroup],
    assonance_groups: Sequence[AssonanceGroup],
) -> WordIndex:
    """Map each word index to its rhyme and assonance memberships.

    Rhyme memberships come first, so a word's first entry is its rhyme group
    whenever it has one. Assonance group ids continue after the rhyme ids.
    """

    index: Dict[int, List[GroupMembership]] = {}
    for group in groups:
        for member in group.members:
            index.setdefault(member.word_index, []).append(
                GroupMembership(group.group_id, member.tail, MEMBERSHIP_RHYME)
            )
    for group in assonance_groups:
        for word_index in group.word_indices:
            index.setdefault(word_index, []).append(
                GroupMembership(group.group_id, 1, MEMBERSHIP_ASSONANCE)
            )
    return {word_index: tuple(entries) for word_index, entries in sorted(index.items())}


def build_scheme(words: Sequence[WordToken], word_index: Mapping[int, Sequence[GroupMembership]]) -> str:
    """Letter each line by the rhyme group of its last word (``-`` if none)."""

    if not words:
        return ""

    last_word_by_line: Dict[int, int] = {}
    for word in words:
        last_word_by_line[word.line] = word.index

    letters: Dict[int, str] = {}
    sequence: List[str] = []
    for line in range(max(word.line for word in words) + 1):
        memberships = word_index.get(last_word_by_line.get(line, -1), ())
        rhyme_ids = [m.group_id for m in memberships if m.type == MEMBERSHIP_RHYME]
        if not rhyme_ids:
            sequence.append(NO_RHYME_MARK)
            continue
        group_id = rhyme_ids[0]
        if group_id not in letters:
            letters[group_id] = _scheme_letter(len(letters))
        sequence.append(letters[group_id])
    return "".join(sequence)


def _scheme_letter(position: int) -> str:
    # A..Z, then AA, AB, ...
    letters = ""
    position += 1
    while position:
        position, remainder = divmod(position - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def build_metrics(
    words: Sequence[WordToken],
    groups: Sequence[RhymeGroup],
    assonance_groups: Sequence[AssonanceGroup],
    word_index: Mapping[int, Sequence[GroupMembership]],
) -> RhymeMetrics:
    if not words:
        return RhymeMetrics()

    line_of = {word.index: word.line for word in words}
    total_syllables = sum(word.syllable_count for word in words)

    rhyming_syllables = 0
    multi_syllables = 0
    per_line: Dict[int, int] = {}
    rhyme_types: Counter[str] = Counter()
    for word_index_value, memberships in word_index.items():
        if not memberships:
            continue
        max_tail = max(membership.tail for membership in memberships)
        rhyming_syllables += max_tail
        multi_syllables += sum(m.tail for m in memberships if m.tail >= 2)
        line = line_of[word_index_value]
        per_line[line] = per_line.get(line, 0) + max_tail
        rhyme_types.update(membership.type for membership in memberships)

    density = rhyming_syllables / total_syllables if total_syllables else 0.0
    multi_ratio = multi_syllables / rhyming_syllables if rhyming_syllables else 0.0
    avg_per_line = sum(per_line.values()) / len(per_line) if per_line else 0.0

    return RhymeMetrics(
        total_syllables=total_syllables,
        rhyming_syllables=rhyming_syllables,
        density=density,
        multi_ratio=multi_ratio,
        avg_per_line=avg_per_line,
        scheme=build_scheme(words, word_index),
        rhyme_types=dict(sorted(rhyme_types.items())),
        group_kinds=dict(sorted(Counter(group.kind for group in groups).items())),
        unique_rhyme_groups=len(groups),
        unique_assonance_groups=len(assonance_groups),
    )


__all__ = [
    "MEMBERSHIP_RHYME",
    "MEMBERSHIP_ASSONANCE",
    "NO_RHYME_MARK",
    "GroupMembership",
    "RhymeMetrics",
    "WordIndex",
    "build_word_index",
    "build_scheme",
    "build_metrics",
]

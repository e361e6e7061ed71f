"""Mosaic rhymes, multisyllabic chains, flow profiling and artist style profiles."""

from __future__ import annotations

from dataclasses import dataclass
from collections import Counter
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from .phonemes import normalize_phone
from .tokenizer import WordToken

MAX_MOSAIC_LINES = 100
MOSAIC_SEARCH_RADIUS = 3
MOSAIC_RESULT_LIMIT = 20
MOSAIC_MIN_WORD_LENGTH = 4
MOSAIC_SUFFIX_WINDOW = 6
SINGLE_TO_PHRASE_MIN_SIMILARITY = 0.5
PHRASE_TO_PHRASE_MIN_SIMILARITY = 0.6

KIND_SINGLE_TO_PHRASE = "single-to-phrase"
KIND_PHRASE_TO_PHRASE = "phrase-to-phrase"

CHAIN_PHRASE_LENGTH = 3
CHAIN_SUFFIX_WINDOW = 8
CHAIN_MIN_PHONES = 3
CHAIN_MIN_SIMILARITY = 0.7

COMPLEXITY_CEILING = 100
DEFAULT_FLOW_STYLE = "standard"

# Neighbouring vowels on the vowel chart.
_SIMILAR_VOWELS: Dict[str, FrozenSet[str]] = {
    "IY": frozenset({"IH", "EH"}),
    "IH": frozenset({"IY", "EH"}),
    "EH": frozenset({"IH", "AE"}),
    "AE": frozenset({"EH", "AA"}),
    "AA": frozenset({"AE", "AH"}),
    "AH": frozenset({"AA", "UH"}),
    "UH": frozenset({"AH", "UW"}),
    "UW": frozenset({"UH", "OW"}),
    "OW": frozenset({"UW", "AO"}),
    "AO": frozenset({"OW", "AA"}),
}

_SIMILAR_CONSONANTS: FrozenSet[FrozenSet[str]] = frozenset(
    frozenset(pair)
    for pair in (
        ("P", "B"),
        ("T", "D"),
        ("K", "G"),
        ("F", "V"),
        ("S", "Z"),
        ("SH", "ZH"),
        ("CH", "JH"),
        ("TH", "DH"),
        ("M", "N"),
        ("N", "NG"),
        ("L", "R"),
        ("W", "Y"),
    )
)


@dataclass(frozen=True)
class MosaicRhyme:
    kind: str
    source: str
    target: str
    source_line: int
    target_line: int
    source_words: Tuple[int, ...]
    target_words: Tuple[int, ...]
    similarity: float


@dataclass(frozen=True)
class FlowPattern:
    line: int
    syllable_count: int
    stress_pattern: Tuple[int, ...]
    tempo: str
    style: str


@dataclass(frozen=True)
class RhymeChain:
    """Two three-word phrases on consecutive lines with matching endings."""

    source: str
    target: str
    source_line: int
    target_line: int
    source_words: Tuple[int, ...]
    target_words: Tuple[int, ...]
    similarity: float
    syllable_count: int


@dataclass(frozen=True)
class ArtistProfile:
    internal_rhyme_density: float
    compound_rhyme_count: int
    avg_multisyllabic_length: float
    dominant_flow_style: str
    complexity: float
    similar_artists: Tuple[str, ...] = ()


def phonemes_similar(first: str, second: str) -> bool:
    if second in _SIMILAR_VOWELS.get(first, ()) or first in _SIMILAR_VOWELS.get(second, ()):
        return True
    return frozenset((first, second)) in _SIMILAR_CONSONANTS


def suffix_similarity(first: Sequence[str], second: Sequence[str]) -> Optional[float]:
    """Score the shared phonetic ending of two phoneme runs.

    Up to six phonemes are compared from the end; an exact match counts 1 and
    a similar phoneme 0.5, and the walk stops at the first mismatch. Returns
    ``None`` unless at least two phonemes matched and the ratio reaches 0.4.
    """

    shortest = min(len(first), len(second))
    if shortest < 2:
        return None

    window = min(shortest, MOSAIC_SUFFIX_WINDOW)
    matched = 0.0
    for offset in range(1, window + 1):
        p1 = normalize_phone(first[-offset])
        p2 = normalize_phone(second[-offset])
        if p1 == p2:
            matched += 1
        elif phonemes_similar(p1, p2):
            matched += 0.5
        else:
            break

    similarity = matched / window
    if similarity >= 0.4 and matched >= 2:
        return similarity
    return None


def _words_by_line(words: Sequence[WordToken]) -> List[List[WordToken]]:
    if not words:
        return []
    lines: List[List[WordToken]] = [[] for _ in range(max(word.line for word in words) + 1)]
    for word in words:
        lines[word.line].append(word)
    return lines


def detect_mosaic_rhymes(words: Sequence[WordToken]) -> Tuple[MosaicRhyme, ...]:
    """Find single words that rhyme with two-word phrases on nearby lines.

    Also pairs the opening two-word phrase of each line with that of the next
    line. Only the first hundred lines are scanned, single words must have at
    least four letters, and at most twenty matches are returned.
    """

    lines = _words_by_line(words)[:MAX_MOSAIC_LINES]
    found: List[MosaicRhyme] = []

    for i, line_words in enumerate(lines):
        for word in line_words:
            if len(word.normalized) < MOSAIC_MIN_WORD_LENGTH:
                continue
            start = max(0, i - MOSAIC_SEARCH_RADIUS)
            stop = min(i + MOSAIC_SEARCH_RADIUS, len(lines) - 1)
            for k in range(start, stop + 1):
                if k == i:
                    continue
                target_line = lines[k]
                for left, right in zip(target_line, target_line[1:]):
                    similarity = suffix_similarity(word.phones, left.phones + right.phones)
                    if similarity is not None and similarity > SINGLE_TO_PHRASE_MIN_SIMILARITY:
                        found.append(
                            MosaicRhyme(
                                kind=KIND_SINGLE_TO_PHRASE,
                                source=word.text,
                                target=f"{left.text} {right.text}",
                                source_line=i,
                                target_line=k,
                                source_words=(word.index,),
                                target_words=(left.index, right.index),
                                similarity=similarity,
                            )
                        )

        if len(line_words) >= 2 and i + 1 < len(lines) and len(lines[i + 1]) >= 2:
            first_pair = line_words[:2]
            second_pair = lines[i + 1][:2]
            similarity = suffix_similarity(
                first_pair[0].phones + first_pair[1].phones,
                second_pair[0].phones + second_pair[1].phones,
            )
            if similarity is not None and similarity > PHRASE_TO_PHRASE_MIN_SIMILARITY:
                found.append(
                    MosaicRhyme(
                        kind=KIND_PHRASE_TO_PHRASE,
                        source=" ".join(word.text for word in first_pair),
                        target=" ".join(word.text for word in second_pair),
                        source_line=i,
                        target_line=i + 1,
                        source_words=tuple(word.index for word in first_pair),
                        target_words=tuple(word.index for word in second_pair),
                        similarity=similarity,
                    )
                )

    return tuple(found[:MOSAIC_RESULT_LIMIT])


def estimate_tempo(stress_pattern: Sequence[int]) -> str:
    if len(stress_pattern) < 4:
        return "slow"
    ratio = sum(1 for stress in stress_pattern if stress == 1) / len(stress_pattern)
    if ratio > 0.6:
        return "rapid"
    if ratio > 0.4:
        return "medium"
    return "laid-back"


def classify_flow_style(stress_pattern: Sequence[int]) -> str:
    signature = "".join(str(stress) for stress in stress_pattern)
    for fragment, style in (
        ("1010", "bounce"),
        ("1001", "triplet"),
        ("111", "chopper"),
        ("10001000", "laid-back"),
        ("110110", "syncopated"),
    ):
        if fragment in signature:
            return style

    longest = current = 0
    for stress in stress_pattern:
        current = current + 1 if stress == 1 else 0
        longest = max(longest, current)
    if longest >= 3:
        return "aggressive"
    if longest == 0:
        return "conversational"
    return "standard"


def analyze_flow(words: Sequence[WordToken]) -> Tuple[FlowPattern, ...]:
    """Describe the stress cadence of every line that has analysed words."""

    patterns: List[FlowPattern] = []
    for line_number, line_words in enumerate(_words_by_line(words)):
        if not line_words:
            continue
        stress_pattern: List[int] = []
        for word in line_words:
            for position in range(len(word.syllables)):
                stress_pattern.append(1 if position == word.stress_index else 0)
        patterns.append(
            FlowPattern(
                line=line_number,
                syllable_count=sum(word.syllable_count for word in line_words),
                stress_pattern=tuple(stress_pattern),
                tempo=estimate_tempo(stress_pattern),
                style=classify_flow_style(stress_pattern),
            )
        )
    return tuple(patterns)


def chain_similarity(first: Sequence[str], second: Sequence[str]) -> float:
    """Score how closely the last eight phonemes of two phrases line up.

    Unlike :func:`suffix_similarity` the walk does not stop at a mismatch,
    so a chain can survive one differing consonant. Runs shorter than three
    phonemes score 0.
    """

    shortest = min(len(first), len(second))
    if shortest < CHAIN_MIN_PHONES:
        return 0.0

    window = min(shortest, CHAIN_SUFFIX_WINDOW)
    matched = 0.0
    for offset in range(1, window + 1):
        p1 = normalize_phone(first[-offset])
        p2 = normalize_phone(second[-offset])
        if p1 == p2:
            matched += 1
        elif phonemes_similar(p1, p2):
            matched += 0.5
    return matched / window


def _phrases(line_words: Sequence[WordToken]) -> Iterable[Tuple[WordToken, ...]]:
    for start in range(len(line_words) - CHAIN_PHRASE_LENGTH + 1):
        yield tuple(line_words[start : start + CHAIN_PHRASE_LENGTH])


def detect_multisyllabic_chains(words: Sequence[WordToken]) -> Tuple[RhymeChain, ...]:
    """Pair every three-word phrase with those on the following line."""

    lines = _words_by_line(words)
    found: List[RhymeChain] = []

    for i in range(len(lines) - 1):
        for source in _phrases(lines[i]):
            source_phones = [phone for word in source for phone in word.phones]
            for target in _phrases(lines[i + 1]):
                target_phones = [phone for word in target for phone in word.phones]
                similarity = chain_similarity(source_phones, target_phones)
                if similarity <= CHAIN_MIN_SIMILARITY:
                    continue
                found.append(
                    RhymeChain(
                        source=" ".join(word.text for word in source),
                        target=" ".join(word.text for word in target),
                        source_line=i,
                        target_line=i + 1,
                        source_words=tuple(word.index for word in source),
                        target_words=tuple(word.index for word in target),
                        similarity=similarity,
                        syllable_count=min(
                            sum(word.syllable_count for word in source),
                            sum(word.syllable_count for word in target),
                        ),
                    )
                )

    return tuple(found)


def dominant_flow_style(patterns: Sequence[FlowPattern]) -> str:
    """Most frequent style; ties go to the style seen first."""

    counts = Counter(pattern.style for pattern in patterns)
    if not counts:
        return DEFAULT_FLOW_STYLE
    return counts.most_common(1)[0][0]


def complexity_score(internal_count: int, compound_count: int, chains: Sequence[RhymeChain]) -> float:
    score = internal_count * 2 + compound_count * 3 + sum(chain.syllable_count for chain in chains)
    return float(min(COMPLEXITY_CEILING, score * 2))


# Flow style to artists, in reporting order.
_STYLE_ARTISTS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("chopper", ("Tech N9ne", "Twista")),
    ("laid-back", ("Snoop Dogg", "Warren G")),
    ("aggressive", ("Eminem", "DMX")),
    ("conversational", ("Biggie", "Jay-Z")),
)


def match_artists(internal_count: int, compound_count: int, styles: Iterable[str]) -> Tuple[str, ...]:
    artists: List[str] = []
    if internal_count > 10:
        artists.extend(("Rakim", "MF DOOM"))
    if compound_count > 5:
        artists.append("Eminem")
    seen_styles = set(styles)
    for style, names in _STYLE_ARTISTS:
        if style in seen_styles:
            artists.extend(names)
    return tuple(dict.fromkeys(artists))


def build_artist_profile(
    line_count: int,
    internal_rhymes: Mapping[int, Sequence[Tuple[int, int]]],
    mosaic_rhymes: Sequence[MosaicRhyme],
    chains: Sequence[RhymeChain],
    flow_patterns: Sequence[FlowPattern],
) -> ArtistProfile:
    """Summarise the hip-hop passes into a single style profile.

    Internal rhyme density is the number of internal pairs per line of
    text; mosaic rhymes count as compound rhymes.
    """

    internal_count = sum(len(pairs) for pairs in internal_rhymes.values())
    compound_count = len(mosaic_rhymes)
    average_chain = sum(chain.syllable_count for chain in chains) / len(chains) if chains else 0.0
    return ArtistProfile(
        internal_rhyme_density=internal_count / max(line_count, 1),
        compound_rhyme_count=compound_count,
        avg_multisyllabic_length=average_chain,
        dominant_flow_style=dominant_flow_style(flow_patterns),
        complexity=complexity_score(internal_count, compound_count, chains),
        similar_artists=match_artists(
            internal_count,
            compound_count,
            (pattern.style for pattern in flow_patterns),
        ),
    )


__all__ = [
    "MAX_MOSAIC_LINES",
    "MOSAIC_SEARCH_RADIUS",
    "MOSAIC_RESULT_LIMIT",
    "KIND_SINGLE_TO_PHRASE",
    "KIND_PHRASE_TO_PHRASE",
    "CHAIN_MIN_SIMILARITY",
    "MosaicRhyme",
    "FlowPattern",
    "RhymeChain",
    "ArtistProfile",
    "phonemes_similar",
    "suffix_similarity",
    "detect_mosaic_rhymes",
    "estimate_tempo",
    "classify_flow_style",
    "analyze_flow",
    "chain_similarity",
    "detect_multisyllabic_chains",
    "dominant_flow_style",
    "complexity_score",
    "match_artists",
    "build_artist_profile",
]

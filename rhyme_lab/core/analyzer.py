"""High level orchestration for rhyme analysis of a block of text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from rhyme_lab.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

from .config import DEFAULT_CONFIG, AnalysisConfig
from .dictionary import DEFAULT_DICTIONARY, PhonemeDictionary
from .grouping import (
    AssonanceGroup,
    RhymeGroup,
    RhymeSpan,
    build_spans,
    find_internal_rhymes,
    group_assonance,
    group_rhymes,
)
from .hiphop import (
    ArtistProfile,
    FlowPattern,
    MosaicRhyme,
    RhymeChain,
    analyze_flow,
    build_artist_profile,
    detect_mosaic_rhymes,
    detect_multisyllabic_chains,
)
from .metrics import GroupMembership, RhymeMetrics, build_metrics, build_word_index
from .tokenizer import WordToken, split_lines, tokenize

ConfigLike = Union[AnalysisConfig, Mapping[str, Any], None]


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one analysis produces, keyed back to token indices."""

    lines: Tuple[str, ...] = ()
    words: Tuple[WordToken, ...] = ()
    spans: Tuple[RhymeSpan, ...] = ()
    groups: Tuple[RhymeGroup, ...] = ()
    assonance_groups: Tuple[AssonanceGroup, ...] = ()
    internal_rhymes: Mapping[int, Tuple[Tuple[int, int], ...]] = field(default_factory=dict)
    word_index: Mapping[int, Tuple[GroupMembership, ...]] = field(default_factory=dict)
    metrics: RhymeMetrics = field(default_factory=RhymeMetrics)
    mosaic_rhymes: Tuple[MosaicRhyme, ...] = ()
    flow_patterns: Tuple[FlowPattern, ...] = ()
    multisyllabic_chains: Tuple[RhymeChain, ...] = ()
    artist_profile: Optional[ArtistProfile] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render the result as JSON-ready data with camelCase keys."""

        metrics = self.metrics
        return {
            "words": [
                {
                    "index": word.index,
                    "text": word.text,
                    "lower": word.normalized,
                    "line": word.line,
                    "start": word.start,
                    "end": word.end,
                    "phones": list(word.phones),
                    "syllables": word.syllable_count,
                    "stressIndex": word.stress_index,
                }
                for word in self.words
            ],
            "spans": [
                {
                    "wordIndex": span.word_index,
                    "line": span.line,
                    "key": span.key.as_text(),
                    "tail": span.tail,
                    "lineFinal": span.line_final,
                }
                for span in self.spans
            ],
            "groups": [
                {"id": group.group_id, "kind": group.kind, "words": list(group.word_indices)}
                for group in self.groups
            ],
            "assonanceGroups": [
                {"id": group.group_id, "vowel": group.vowel, "words": list(group.word_indices)}
                for group in self.assonance_groups
            ],
            "internalRhymes": {
                str(line): [list(pair) for pair in pairs] for line, pairs in self.internal_rhymes.items()
            },
            "wordToGroup": {
                str(index): [[m.group_id, m.tail, m.type] for m in memberships]
                for index, memberships in self.word_index.items()
            },
            "metrics": {
                "totalSyllables": metrics.total_syllables,
                "rhymingSyllables": metrics.rhyming_syllables,
                "density": metrics.density,
                "multiRatio": metrics.multi_ratio,
                "avgPerLine": metrics.avg_per_line,
                "scheme": metrics.scheme,
                "rhymeTypes": dict(metrics.rhyme_types),
                "groupKinds": dict(metrics.group_kinds),
                "uniqueGroups": metrics.unique_rhyme_groups,
                "uniqueAssonanceGroups": metrics.unique_assonance_groups,
            },
            "mosaicRhymes": [
                {
                    "type": mosaic.kind,
                    "source": mosaic.source,
                    "target": mosaic.target,
                    "sourceLine": mosaic.source_line,
                    "targetLine": mosaic.target_line,
                    "sourceWords": list(mosaic.source_words),
                    "targetWords": list(mosaic.target_words),
                    "similarity": mosaic.similarity,
                }
                for mosaic in self.mosaic_rhymes
            ],
            "flowPatterns": [
                {
                    "line": pattern.line,
                    "syllableCount": pattern.syllable_count,
                    "stressPattern": list(pattern.stress_pattern),
                    "tempo": pattern.tempo,
                    "style": pattern.style,
                }
                for pattern in self.flow_patterns
            ],
            "multisyllabicChains": [
                {
                    "source": chain.source,
                    "target": chain.target,
                    "sourceLine": chain.source_line,
                    "targetLine": chain.target_line,
                    "sourceWords": list(chain.source_words),
                    "targetWords": list(chain.target_words),
                    "similarity": chain.similarity,
                    "syllableCount": chain.syllable_count,
                }
                for chain in self.multisyllabic_chains
            ],
            "artistProfile": _profile_to_dict(self.artist_profile),
        }


def _profile_to_dict(profile: Optional[ArtistProfile]) -> Optional[Dict[str, Any]]:
    if profile is None:
        return None
    return {
        "internalRhymeDensity": profile.internal_rhyme_density,
        "compoundRhymeCount": profile.compound_rhyme_count,
        "avgMultisyllabicLength": profile.avg_multisyllabic_length,
        "dominantFlowStyle": profile.dominant_flow_style,
        "complexity": profile.complexity,
        "similarArtists": list(profile.similar_artists),
    }


def _resolve_config(config: ConfigLike, fallback: AnalysisConfig) -> AnalysisConfig:
    if config is None:
        return fallback
    if isinstance(config, AnalysisConfig):
        return config
    return AnalysisConfig.from_mapping(config)


class RhymeAnalyzer:
    """Run the tokenise, group and measure pipeline over text."""

    def __init__(
        self,
        config: ConfigLike = None,
        dictionary: Optional[PhonemeDictionary] = None,
    ) -> None:
        self.config = _resolve_config(config, DEFAULT_CONFIG)
        self.dictionary = dictionary if dictionary is not None else DEFAULT_DICTIONARY

        self._logger = get_logger(__name__).bind(component="rhyme_analyzer")
        self._metric_analyses = create_counter(
            "rhyme_lab_analyses_total",
            "Total rhyme analyses run.",
            label_names=("strategy",),
        )
        self._metric_failures = create_counter(
            "rhyme_lab_analysis_failures_total",
            "Total rhyme analyses that raised an exception.",
        )
        self._metric_duration = create_histogram(
            "rhyme_lab_analysis_seconds",
            "Latency of rhyme analyses.",
        )

    def analyze(self, text: str, config: ConfigLike = None) -> AnalysisResult:
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")

        settings = _resolve_config(config, self.config)
        request_context = {
            "characters": len(text),
            "strategy": settings.match_strategy.value,
        }
        self._metric_analyses.labels(strategy=settings.match_strategy.value).inc()

        with start_span("rhyme_lab.analyze", request_context) as span:
            try:
                with self._metric_duration.time():
                    result = self._analyze(text, settings)
            except Exception as exc:
                self._metric_failures.inc()
                self._logger.exception(
                    "Rhyme analysis failed",
                    context={**request_context, "error": str(exc)},
                )
                record_exception(span, exc)
                raise

            summary = {
                "words": len(result.words),
                "groups": len(result.groups),
                "assonance_groups": len(result.assonance_groups),
                "scheme": result.metrics.scheme,
            }
            add_span_attributes(
                span,
                {
                    "result.words": summary["words"],
                    "result.groups": summary["groups"],
                    "result.assonance_groups": summary["assonance_groups"],
                },
            )
            self._logger.info("Rhyme analysis completed", context=summary)
            return result

    def _analyze(self, text: str, settings: AnalysisConfig) -> AnalysisResult:
        lines = split_lines(text)
        if not text.strip():
            return AnalysisResult(lines=lines)

        cap = settings.max_words
        words = tokenize(
            text,
            dictionary=self.dictionary,
            skip_short_stop_words=settings.skip_short_stop_words,
            max_words=None if cap is None else cap + 1,
        )
        if cap is not None and len(words) > cap:
            self._logger.warning(
                "Word limit reached; remaining text ignored",
                context={"max_words": cap},
            )
            words = words[:cap]
        self._logger.debug("Tokenised text", context={"words": len(words), "lines": len(lines)})

        matcher = settings.build_matcher()
        spans = build_spans(words)
        groups = group_rhymes(spans, matcher)
        self._logger.debug("Grouped rhymes", context={"spans": len(spans), "groups": len(groups)})

        assonance_groups: Tuple[AssonanceGroup, ...] = ()
        if settings.assonance_enabled:
            assonance_groups = group_assonance(words, first_group_id=len(groups))
            self._logger.debug("Grouped assonance", context={"groups": len(assonance_groups)})

        internal_rhymes: Dict[int, Tuple[Tuple[int, int], ...]] = {}
        if settings.internal_rhymes_enabled:
            internal_rhymes = find_internal_rhymes(spans, matcher)
            self._logger.debug("Found internal rhymes", context={"lines": len(internal_rhymes)})

        word_index = build_word_index(groups, assonance_groups)
        metrics = build_metrics(words, groups, assonance_groups, word_index)

        # The artist profile draws on every hip-hop pass, whatever their own flags say.
        profiling = settings.artist_profile_enabled

        mosaic_rhymes: Tuple[MosaicRhyme, ...] = ()
        if settings.mosaic_enabled or profiling:
            mosaic_rhymes = detect_mosaic_rhymes(words)
            self._logger.debug("Detected mosaic rhymes", context={"matches": len(mosaic_rhymes)})

        chains: Tuple[RhymeChain, ...] = ()
        if settings.chains_enabled or profiling:
            chains = detect_multisyllabic_chains(words)
            self._logger.debug("Detected multisyllabic chains", context={"chains": len(chains)})

        flow_patterns: Tuple[FlowPattern, ...] = ()
        if settings.flow_enabled or profiling:
            flow_patterns = analyze_flow(words)

        artist_profile: Optional[ArtistProfile] = None
        if profiling:
            profile_pairs = internal_rhymes
            if not settings.internal_rhymes_enabled:
                profile_pairs = find_internal_rhymes(spans, matcher)
            artist_profile = build_artist_profile(
                len(lines),
                profile_pairs,
                mosaic_rhymes,
                chains,
                flow_patterns,
            )

        return AnalysisResult(
            lines=lines,
            words=words,
            spans=spans,
            groups=groups,
            assonance_groups=assonance_groups,
            internal_rhymes=internal_rhymes,
            word_index=word_index,
            metrics=metrics,
            mosaic_rhymes=mosaic_rhymes if settings.mosaic_enabled else (),
            flow_patterns=flow_patterns if settings.flow_enabled else (),
            multisyllabic_chains=chains if settings.chains_enabled else (),
            artist_profile=artist_profile,
        )


_default_analyzer: Optional[RhymeAnalyzer] = None


def analyze(text: str, config: ConfigLike = None) -> AnalysisResult:
    """Analyse ``text`` with the shared default analyzer."""

    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = RhymeAnalyzer()
    return _default_analyzer.analyze(text, config)


__all__ = ["AnalysisResult", "RhymeAnalyzer", "analyze"]

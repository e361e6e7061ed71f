"""Command line entry point for analysing lyrics from a file or stdin."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from rhyme_lab.core.analyzer import AnalysisResult, RhymeAnalyzer
from rhyme_lab.core.config import AnalysisConfig
from rhyme_lab.core.errors import ConfigurationError
from rhyme_lab.core.scorer import MatchStrategy
from rhyme_lab.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rhyme-lab",
        description="Find rhyme groups, assonance and internal rhymes in a block of text.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Text file to analyse. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "--perfect-threshold",
        type=float,
        help="Maximum distance for two line-final words to rhyme.",
    )
    parser.add_argument(
        "--slant-threshold",
        type=float,
        help="Maximum distance for internal and lenient rhymes.",
    )
    parser.add_argument(
        "--positional-threshold",
        type=float,
        help="Minimum tail score when using the positional-score strategy.",
    )
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in MatchStrategy],
        help="Pair matching strategy (defaults to distance).",
    )
    parser.add_argument(
        "--no-assonance",
        action="store_true",
        help="Skip assonance grouping.",
    )
    parser.add_argument(
        "--no-internal",
        action="store_true",
        help="Skip per-line internal rhyme detection.",
    )
    parser.add_argument(
        "--mosaic",
        action="store_true",
        help="Detect multi-word (mosaic) rhymes.",
    )
    parser.add_argument(
        "--flow",
        action="store_true",
        help="Report per-line stress patterns and flow style.",
    )
    parser.add_argument(
        "--chains",
        action="store_true",
        help="Detect three-word rhyme chains across consecutive lines.",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Summarise the verse as an artist style profile.",
    )
    parser.add_argument(
        "--keep-stop-words",
        action="store_true",
        help="Analyse short stop words such as 'a' and 'me' too.",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        help="Stop analysing after this many words.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of formatted text.",
    )
    parser.add_argument(
        "--pretty-json",
        action="store_true",
        help="Indent JSON output for readability (implies --json).",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (overrides RHYME_LAB_LOG_LEVEL).",
    )
    return parser


def _resolve_options(namespace: argparse.Namespace) -> Dict[str, Any]:
    """Translate CLI arguments to :class:`AnalysisConfig` fields."""

    options: Dict[str, Any] = {
        "perfect_threshold": namespace.perfect_threshold,
        "slant_threshold": namespace.slant_threshold,
        "positional_threshold": namespace.positional_threshold,
        "match_strategy": namespace.strategy,
        "max_words": namespace.max_words,
    }
    cleaned = {key: value for key, value in options.items() if value is not None}
    if namespace.no_assonance:
        cleaned["assonance_enabled"] = False
    if namespace.no_internal:
        cleaned["internal_rhymes_enabled"] = False
    if namespace.mosaic:
        cleaned["mosaic_enabled"] = True
    if namespace.flow:
        cleaned["flow_enabled"] = True
    if namespace.chains:
        cleaned["chains_enabled"] = True
    if namespace.profile:
        cleaned["artist_profile_enabled"] = True
    if namespace.keep_stop_words:
        cleaned["skip_short_stop_words"] = False
    return cleaned


def _read_text(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def format_result(result: AnalysisResult) -> str:
    """Render a human readable summary of ``result``."""

    metrics = result.metrics
    words = result.words
    lines: List[str] = [
        f"Words analysed: {len(words)}",
        f"Rhyme density: {metrics.density * 100:.1f}%",
        f"Multi-syllabic ratio: {metrics.multi_ratio * 100:.1f}%",
        f"Avg rhyming syllables per line: {metrics.avg_per_line:.2f}",
        f"End rhyme scheme: {metrics.scheme or 'No pattern'}",
    ]

    if result.groups:
        lines.append("")
        lines.append("Rhyme groups:")
        for group in result.groups:
            members = ", ".join(words[index].text for index in group.word_indices)
            lines.append(f"  {group.group_id + 1}. [{group.kind}] {members}")

    if result.assonance_groups:
        lines.append("")
        lines.append("Assonance groups:")
        for group in result.assonance_groups:
            members = ", ".join(words[index].text for index in group.word_indices)
            lines.append(f"  {group.vowel}: {members}")

    if result.internal_rhymes:
        lines.append("")
        lines.append("Internal rhymes:")
        for line, pairs in result.internal_rhymes.items():
            rendered = ", ".join(f"{words[a].text}/{words[b].text}" for a, b in pairs)
            lines.append(f"  Line {line + 1}: {rendered}")

    if result.mosaic_rhymes:
        lines.append("")
        lines.append("Mosaic rhymes:")
        for mosaic in result.mosaic_rhymes:
            lines.append(
                f"  {mosaic.source} ~ {mosaic.target} "
                f"(lines {mosaic.source_line + 1}/{mosaic.target_line + 1}, {mosaic.similarity:.2f})"
            )

    if result.flow_patterns:
        lines.append("")
        lines.append("Flow:")
        for pattern in result.flow_patterns:
            stresses = "".join(str(stress) for stress in pattern.stress_pattern)
            lines.append(
                f"  Line {pattern.line + 1}: {pattern.syllable_count} syllables, "
                f"{pattern.tempo}, {pattern.style} ({stresses})"
            )

    if result.multisyllabic_chains:
        lines.append("")
        lines.append("Multisyllabic chains:")
        for chain in result.multisyllabic_chains:
            lines.append(
                f"  {chain.source} ~ {chain.target} "
                f"(lines {chain.source_line + 1}/{chain.target_line + 1}, "
                f"{chain.syllable_count} syllables, {chain.similarity:.2f})"
            )

    profile = result.artist_profile
    if profile is not None:
        lines.append("")
        lines.append("Artist profile:")
        lines.append(f"  Internal rhymes per line: {profile.internal_rhyme_density:.2f}")
        lines.append(f"  Compound rhymes: {profile.compound_rhyme_count}")
        lines.append(f"  Avg chain length: {profile.avg_multisyllabic_length:.1f} syllables")
        lines.append(f"  Dominant flow: {profile.dominant_flow_style}")
        lines.append(f"  Complexity: {profile.complexity:.0f}/100")
        if profile.similar_artists:
            lines.append(f"  Similar artists: {', '.join(profile.similar_artists)}")

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        print(f"rhyme-lab: {exc}", file=sys.stderr)
        return 2

    try:
        config = AnalysisConfig.from_mapping(_resolve_options(args))
    except ConfigurationError as exc:
        print(f"rhyme-lab: {exc}", file=sys.stderr)
        return 2

    text = _read_text(args.path)
    result = RhymeAnalyzer(config).analyze(text)

    if args.pretty_json or args.json:
        indent = 2 if args.pretty_json else None
        json.dump(result.to_dict(), sys.stdout, indent=indent, ensure_ascii=False, sort_keys=True)
        sys.stdout.write("\n")
        return 0

    print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

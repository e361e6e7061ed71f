"""Analysis options and their validation."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from rhyme_lab.utils.observability import get_logger

from .errors import ConfigurationError
from .scorer import DistanceMatcher, MatchStrategy, PairMatcher, PositionalMatcher

_logger = get_logger(__name__).bind(component="analysis_config")

_THRESHOLD_FIELDS = ("perfect_threshold", "slant_threshold", "positional_threshold")
_FLAG_FIELDS = (
    "assonance_enabled",
    "internal_rhymes_enabled",
    "mosaic_enabled",
    "flow_enabled",
    "chains_enabled",
    "artist_profile_enabled",
    "skip_short_stop_words",
)

# Names used by editor integrations and JSON payloads.
_CAMEL_CASE_ALIASES: Dict[str, str] = {
    "perfectThreshold": "perfect_threshold",
    "slantThreshold": "slant_threshold",
    "positionalThreshold": "positional_threshold",
    "assonanceEnabled": "assonance_enabled",
    "highlightAssonance": "assonance_enabled",
    "internalRhymesEnabled": "internal_rhymes_enabled",
    "showInternalRhymes": "internal_rhymes_enabled",
    "mosaicEnabled": "mosaic_enabled",
    "flowEnabled": "flow_enabled",
    "chainsEnabled": "chains_enabled",
    "multisyllabicChainsEnabled": "chains_enabled",
    "artistProfileEnabled": "artist_profile_enabled",
    "matchStrategy": "match_strategy",
    "skipShortStopWords": "skip_short_stop_words",
    "maxWords": "max_words",
}


def _clamp_threshold(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {type(value).__name__}")
    number = float(value)
    if math.isnan(number):
        raise ConfigurationError(f"{name} must not be NaN")
    clamped = max(0.0, min(1.0, number))
    if clamped != number:
        _logger.warning(
            "Threshold outside [0, 1] clamped",
            context={"option": name, "value": number, "clamped": clamped},
        )
    return clamped


def _coerce_strategy(value: Any) -> MatchStrategy:
    if isinstance(value, MatchStrategy):
        return value
    try:
        return MatchStrategy(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(strategy.value for strategy in MatchStrategy)
        raise ConfigurationError(f"match_strategy must be one of: {allowed}") from exc


@dataclass(frozen=True)
class AnalysisConfig:
    """Tuning knobs for a single analysis call.

    Thresholds are advisory: values outside ``[0, 1]`` are clamped. Options of
    the wrong type raise :class:`ConfigurationError`.
    """

    perfect_threshold: float = 0.10
    slant_threshold: float = 0.25
    positional_threshold: float = 0.5
    assonance_enabled: bool = True
    internal_rhymes_enabled: bool = True
    mosaic_enabled: bool = False
    flow_enabled: bool = False
    chains_enabled: bool = False
    artist_profile_enabled: bool = False
    match_strategy: MatchStrategy = MatchStrategy.DISTANCE
    skip_short_stop_words: bool = True
    max_words: Optional[int] = 5000

    def __post_init__(self) -> None:
        for name in _THRESHOLD_FIELDS:
            object.__setattr__(self, name, _clamp_threshold(name, getattr(self, name)))
        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be a boolean")
        object.__setattr__(self, "match_strategy", _coerce_strategy(self.match_strategy))
        if self.max_words is not None:
            if isinstance(self.max_words, bool) or not isinstance(self.max_words, int):
                raise ConfigurationError("max_words must be an integer or None")
            if self.max_words <= 0:
                raise ConfigurationError("max_words must be positive")

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "AnalysisConfig":
        """Build a config from snake_case or camelCase option names."""

        if not options:
            return cls()

        known = {field.name for field in fields(cls)}
        resolved: Dict[str, Any] = {}
        for raw_key, value in options.items():
            key = _CAMEL_CASE_ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise ConfigurationError(f"Unknown analysis option: {raw_key}")
            resolved[key] = value
        return cls(**resolved)

    def with_overrides(self, **changes: Any) -> "AnalysisConfig":
        return replace(self, **changes)

    def build_matcher(self) -> PairMatcher:
        if self.match_strategy is MatchStrategy.POSITIONAL_SCORE:
            return PositionalMatcher(self.positional_threshold)
        return DistanceMatcher(self.perfect_threshold, self.slant_threshold)

    def as_dict(self) -> Dict[str, Any]:
        payload = {field.name: getattr(self, field.name) for field in fields(self)}
        payload["match_strategy"] = self.match_strategy.value
        return payload


DEFAULT_CONFIG = AnalysisConfig()

__all__ = ["AnalysisConfig", "DEFAULT_CONFIG"]

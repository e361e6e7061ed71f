import logging

import pytest

from rhyme_lab.core.config import DEFAULT_CONFIG, AnalysisConfig
from rhyme_lab.core.errors import ConfigurationError, RhymeLabError
from rhyme_lab.core.scorer import DistanceMatcher, MatchStrategy, PositionalMatcher


def test_defaults():
    assert DEFAULT_CONFIG.perfect_threshold == 0.10
    assert DEFAULT_CONFIG.slant_threshold == 0.25
    assert DEFAULT_CONFIG.match_strategy is MatchStrategy.DISTANCE
    assert DEFAULT_CONFIG.assonance_enabled
    assert not DEFAULT_CONFIG.mosaic_enabled
    assert DEFAULT_CONFIG.max_words == 5000


def test_out_of_range_thresholds_are_clamped(caplog):
    caplog.set_level(logging.WARNING, logger="rhyme_lab")

    config = AnalysisConfig(perfect_threshold=-0.5, slant_threshold=1.5)

    assert config.perfect_threshold == 0.0
    assert config.slant_threshold == 1.0
    assert "Threshold outside [0, 1] clamped" in caplog.text


@pytest.mark.parametrize(
    "options",
    [
        {"perfect_threshold": "high"},
        {"slant_threshold": float("nan")},
        {"assonance_enabled": "yes"},
        {"match_strategy": "vibes"},
        {"max_words": 0},
        {"max_words": 2.5},
    ],
)
def test_wrong_types_raise(options):
    with pytest.raises(ConfigurationError):
        AnalysisConfig(**options)


def test_configuration_error_is_a_value_error():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ConfigurationError, RhymeLabError)


def test_from_mapping_accepts_camel_case_names():
    config = AnalysisConfig.from_mapping(
        {
            "perfectThreshold": 0.2,
            "slant_threshold": 0.4,
            "matchStrategy": "Positional-Score",
            "showInternalRhymes": False,
        }
    )

    assert config.perfect_threshold == 0.2
    assert config.slant_threshold == 0.4
    assert config.match_strategy is MatchStrategy.POSITIONAL_SCORE
    assert config.internal_rhymes_enabled is False


def test_hiphop_flags_map_from_camel_case():
    config = AnalysisConfig.from_mapping({"chainsEnabled": True, "artistProfileEnabled": True})

    assert config.chains_enabled is True
    assert config.artist_profile_enabled is True
    assert not DEFAULT_CONFIG.chains_enabled
    assert not DEFAULT_CONFIG.artist_profile_enabled
    with pytest.raises(ConfigurationError):
        AnalysisConfig(artist_profile_enabled="on")


def test_from_mapping_rejects_unknown_options():
    with pytest.raises(ConfigurationError):
        AnalysisConfig.from_mapping({"rhymeHarder": True})


def test_from_mapping_empty_is_default():
    assert AnalysisConfig.from_mapping(None) == DEFAULT_CONFIG
    assert AnalysisConfig.from_mapping({}) == DEFAULT_CONFIG


def test_with_overrides_returns_a_copy():
    relaxed = DEFAULT_CONFIG.with_overrides(perfect_threshold=0.3)

    assert relaxed.perfect_threshold == 0.3
    assert DEFAULT_CONFIG.perfect_threshold == 0.10


def test_build_matcher_follows_strategy():
    assert isinstance(DEFAULT_CONFIG.build_matcher(), DistanceMatcher)
    positional = AnalysisConfig(match_strategy="positional-score", positional_threshold=0.7)
    matcher = positional.build_matcher()
    assert isinstance(matcher, PositionalMatcher)
    assert matcher.minimum_score == 0.7


def test_as_dict_is_json_friendly():
    payload = DEFAULT_CONFIG.as_dict()

    assert payload["match_strategy"] == "distance"
    assert payload["max_words"] == 5000

import logging

import pytest

from rhyme_lab import analyze
from rhyme_lab.core.analyzer import AnalysisResult, RhymeAnalyzer
from rhyme_lab.core.config import AnalysisConfig
from rhyme_lab.core.dictionary import PhonemeDictionary
from rhyme_lab.core.metrics import RhymeMetrics


def test_repeated_word_joins_a_group_once(analyzer):
    result = analyzer.analyze("cat\nhat\nhat")

    assert [group.word_indices for group in result.groups] == [(0, 1)]
    assert result.metrics.scheme == "AA-"


def test_perfect_rhyme_scenario(analyzer):
    result = analyzer.analyze("cat\nhat")

    assert len(result.groups) == 1
    assert result.groups[0].word_indices == (0, 1)
    assert result.metrics.scheme == "AA"


def test_no_rhyme_scenario(analyzer):
    result = analyzer.analyze("cat\ndog")

    assert result.groups == ()
    assert result.metrics.scheme == "--"


def test_stop_words_stay_out_of_assonance(analyzer):
    result = analyzer.analyze("the cat sat splat")

    the_index = next(word.index for word in result.words if word.normalized == "the")
    assert result.assonance_groups
    assert all(the_index not in group.word_indices for group in result.assonance_groups)


@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_blank_input_returns_empty_result(analyzer, text):
    result = analyzer.analyze(text)

    assert result.words == ()
    assert result.groups == ()
    assert result.assonance_groups == ()
    assert result.metrics == RhymeMetrics()
    assert result.to_dict()["metrics"]["density"] == 0


def test_non_string_input_is_rejected(analyzer):
    with pytest.raises(TypeError):
        analyzer.analyze(None)


def test_analysis_is_idempotent(analyzer, cross_rhyme_verse):
    first = analyzer.analyze(cross_rhyme_verse)
    second = analyzer.analyze(cross_rhyme_verse)

    assert first.to_dict() == second.to_dict()
    assert first.metrics.scheme == "ABAB"


def test_word_offsets_point_into_the_text(analyzer):
    text = "Cat,\nthat HAT"
    result = analyzer.analyze(text)

    for word in result.words:
        assert text[word.start : word.end] == word.text
    assert [word.normalized for word in result.words] == ["cat", "that", "hat"]


def test_dictionary_precedence_changes_grouping():
    custom = PhonemeDictionary({"cat": ["D", "AO1", "G"]})
    result = RhymeAnalyzer(dictionary=custom).analyze("cat\ndog")

    assert len(result.groups) == 1
    assert result.metrics.scheme == "AA"


def test_optional_passes_can_be_disabled(analyzer):
    config = AnalysisConfig(assonance_enabled=False, internal_rhymes_enabled=False)
    result = analyzer.analyze("that cat sat splat", config)

    assert result.assonance_groups == ()
    assert result.internal_rhymes == {}
    assert len(result.groups) == 1


def test_internal_rhymes_are_reported_by_line(analyzer):
    result = analyzer.analyze("cat sat splat\ndog")

    assert result.internal_rhymes == {0: ((0, 1), (0, 2), (1, 2))}


def test_mapping_config_uses_external_option_names(analyzer):
    result = analyzer.analyze("cat\nhat", {"matchStrategy": "positional-score", "assonanceEnabled": False})

    assert len(result.groups) == 1
    assert result.assonance_groups == ()


def test_threshold_can_be_relaxed(analyzer):
    strict = analyzer.analyze("cat\ncart")
    relaxed = analyzer.analyze("cat\ncart", AnalysisConfig(perfect_threshold=0.2))

    assert strict.groups == ()
    assert len(relaxed.groups) == 1


def test_word_limit_truncates_and_warns(caplog):
    caplog.set_level(logging.WARNING, logger="rhyme_lab")
    result = RhymeAnalyzer(AnalysisConfig(max_words=2)).analyze("cat hat\nbat mat")

    assert [word.normalized for word in result.words] == ["cat", "hat"]
    assert "Word limit reached" in caplog.text


def test_short_stop_words_can_be_kept(analyzer):
    skipped = analyzer.analyze("I am a cat")
    kept = analyzer.analyze("I am a cat", AnalysisConfig(skip_short_stop_words=False))

    assert [word.normalized for word in skipped.words] == ["am", "cat"]
    assert [word.normalized for word in kept.words] == ["i", "am", "a", "cat"]


def test_hiphop_passes_are_opt_in(mosaic_dictionary):
    text = "orange\ndoor hinge"
    default = RhymeAnalyzer(dictionary=mosaic_dictionary).analyze(text)
    enabled = RhymeAnalyzer(
        AnalysisConfig(mosaic_enabled=True, flow_enabled=True),
        dictionary=mosaic_dictionary,
    ).analyze(text)

    assert default.mosaic_rhymes == ()
    assert default.flow_patterns == ()
    assert len(enabled.mosaic_rhymes) == 1
    assert [pattern.line for pattern in enabled.flow_patterns] == [0, 1]


def test_chains_and_profile_are_opt_in(chain_dictionary):
    text = "cat sat hat\nbat mat rat"
    default = RhymeAnalyzer(dictionary=chain_dictionary).analyze(text)
    enabled = RhymeAnalyzer(
        AnalysisConfig(chains_enabled=True, artist_profile_enabled=True),
        dictionary=chain_dictionary,
    ).analyze(text)

    assert default.multisyllabic_chains == ()
    assert default.artist_profile is None
    assert default.to_dict()["artistProfile"] is None
    assert [chain.source for chain in enabled.multisyllabic_chains] == ["cat sat hat"]

    profile = enabled.artist_profile
    assert profile.internal_rhyme_density == pytest.approx(3.0)
    assert profile.compound_rhyme_count == 0
    assert profile.avg_multisyllabic_length == pytest.approx(3.0)
    assert profile.dominant_flow_style == "chopper"
    assert profile.complexity == 30.0
    assert profile.similar_artists == ("Tech N9ne", "Twista")


def test_profile_runs_its_passes_without_exposing_them(chain_dictionary):
    config = AnalysisConfig(artist_profile_enabled=True, internal_rhymes_enabled=False)
    result = RhymeAnalyzer(config, dictionary=chain_dictionary).analyze("cat sat hat\nbat mat rat")

    assert result.internal_rhymes == {}
    assert result.flow_patterns == ()
    assert result.multisyllabic_chains == ()
    assert result.artist_profile.internal_rhyme_density == pytest.approx(3.0)
    assert result.artist_profile.avg_multisyllabic_length == pytest.approx(3.0)

    payload = result.to_dict()
    assert payload["multisyllabicChains"] == []
    assert payload["artistProfile"]["dominantFlowStyle"] == "chopper"
    assert payload["artistProfile"]["similarArtists"] == ["Tech N9ne", "Twista"]


def test_to_dict_uses_camel_case_keys(analyzer):
    payload = analyzer.analyze("cat\nhat").to_dict()

    assert set(payload) >= {"words", "groups", "assonanceGroups", "internalRhymes", "wordToGroup", "metrics"}
    assert payload["wordToGroup"]["0"] == [[0, 1, "rhyme"]]
    assert payload["metrics"]["multiRatio"] == 0.0
    assert payload["metrics"]["avgPerLine"] == 1.0
    assert payload["words"][1]["start"] == 4


def test_module_level_analyze_matches_instance():
    result = analyze("cat\nhat")

    assert isinstance(result, AnalysisResult)
    assert result.metrics.scheme == "AA"


def test_completion_is_logged(caplog, analyzer):
    caplog.set_level(logging.INFO, logger="rhyme_lab")
    analyzer.analyze("cat\nhat")

    assert "Rhyme analysis completed" in caplog.text
    assert '"component": "rhyme_analyzer"' in caplog.text

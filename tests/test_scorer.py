import itertools

import pytest

from rhyme_lab.core.rhyme_key import NUCLEUS_SEPARATOR, RhymeKey
from rhyme_lab.core.scorer import (
    DistanceMatcher,
    MatchStrategy,
    PositionalMatcher,
    coda_distance,
    nucleus_distance,
    rhyme_distance,
    score_rhyme,
)

SAMPLE_KEYS = [
    RhymeKey("A", ("T",)),
    RhymeKey("AH", ("T",)),
    RhymeKey("UH+A", ()),
    RhymeKey("OR", ("K",)),
    RhymeKey("EE", ("N", "T")),
    RhymeKey("EYE", ()),
]


def test_nucleus_distance_levels():
    assert nucleus_distance("A", "A") == 0.0
    assert nucleus_distance("UH+A", "A") == pytest.approx(0.05)
    assert nucleus_distance("A", "AH") == pytest.approx(0.25)
    assert nucleus_distance("A", "OR") == pytest.approx(0.6)


def test_absorbed_nuclei_compare_on_the_vowel_after_the_separator():
    absorbed = NUCLEUS_SEPARATOR.join(["UH", "A"])
    other = NUCLEUS_SEPARATOR.join(["EE", "A"])

    assert RhymeKey(absorbed, ()).final_vowel == "A"
    assert nucleus_distance(absorbed, other) == pytest.approx(0.05)
    assert nucleus_distance(absorbed, NUCLEUS_SEPARATOR.join(["A", "OR"])) == pytest.approx(0.6)


def test_coda_distance_levels():
    assert coda_distance(("T",), ("T",)) == 0.0
    assert coda_distance(("T",), ("D",)) == 0.0
    assert coda_distance((), ("T",)) == pytest.approx(0.6)
    assert coda_distance(("T",), ("K",)) == pytest.approx(0.35)
    assert coda_distance(("N", "T"), ("T",)) == pytest.approx(0.175)


def test_rhyme_distance_weights_nucleus_and_coda():
    cat = RhymeKey("A", ("T",))
    dog = RhymeKey("OR", ("K",))

    assert rhyme_distance(cat, RhymeKey("AH", ("T",))) == pytest.approx(0.175)
    assert rhyme_distance(cat, dog) == pytest.approx(0.7 * 0.6 + 0.3 * 0.35)


def test_rhyme_distance_identity_symmetry_and_bounds():
    for key in SAMPLE_KEYS:
        assert rhyme_distance(key, key) == 0.0
    for first, second in itertools.combinations(SAMPLE_KEYS, 2):
        distance = rhyme_distance(first, second)
        assert distance == rhyme_distance(second, first)
        assert 0.0 <= distance <= 1.0


def test_score_rhyme_identical_tails():
    assert score_rhyme(("AE1", "T"), ("AE0", "T")) == 1.0


def test_score_rhyme_rewards_matches_near_the_end():
    assert score_rhyme(("AE1", "T"), ("AE1", "D")) == pytest.approx(0.5)
    assert score_rhyme(("IY1", "T"), ("IH1", "T")) == pytest.approx(0.95)
    assert score_rhyme(("AE1", "T"), ("OW1", "K")) == 0.0
    assert score_rhyme((), ("T",)) == 0.0


def test_distance_matcher_thresholds_depend_on_position():
    matcher = DistanceMatcher(0.1, 0.3)

    assert matcher.strategy is MatchStrategy.DISTANCE
    assert matcher.threshold_for(True, True) == 0.1
    assert matcher.threshold_for(True, False) == pytest.approx(0.2)
    assert matcher.threshold_for(False, True) == pytest.approx(0.2)
    assert matcher.threshold_for(False, False) == 0.3
    assert matcher.internal_threshold == 0.3


def test_positional_matcher_uses_one_threshold():
    matcher = PositionalMatcher(0.5)

    assert matcher.strategy is MatchStrategy.POSITIONAL_SCORE
    assert matcher.threshold_for(True, True) == matcher.threshold_for(False, False) == 0.5
    assert matcher.internal_threshold == 0.5

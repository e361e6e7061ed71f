from rhyme_lab.core.rhyme_key import (
    RhymeKey,
    extract_rhyme_key,
    multisyllabic_key,
    normalize_coda,
    rhyme_tail,
    stressed_vowel_label,
)
from rhyme_lab.core.syllables import syllabify


def _phones(syllables):
    return [syllable.phones for syllable in syllables]


def test_single_syllable_word():
    syllables, stress = syllabify(("K", "AE1", "T"))

    assert _phones(syllables) == [("K", "AE1", "T")]
    assert stress == 0
    assert syllables[0].coda == ("T",)


def test_consonants_after_a_vowel_stay_with_that_syllable():
    syllables, stress = syllabify(("HH", "AE1", "P", "IY0"))

    assert _phones(syllables) == [("HH", "AE1", "P"), ("IY0",)]
    assert stress == 0


def test_stress_falls_on_first_primary_vowel():
    syllables, stress = syllabify(("AH0", "B", "AW1", "T"))

    assert _phones(syllables) == [("AH0", "B"), ("AW1", "T")]
    assert stress == 1


def test_unstressed_words_use_last_syllable():
    _, stress = syllabify(("AH0", "B", "AH0"))

    assert stress == 1


def test_no_vowels_means_no_syllables():
    assert syllabify(("S", "T")) == ((), None)
    assert syllabify(()) == ((), None)


def test_rhyme_key_ignores_onset_and_folds_voicing():
    dog = extract_rhyme_key(*syllabify(("D", "AO1", "G")))
    cat = extract_rhyme_key(*syllabify(("K", "AE1", "T")))

    assert dog == RhymeKey("OR", ("K",))
    assert cat == RhymeKey("A", ("T",))
    assert cat.as_text() == "A T"


def test_weak_coda_absorbs_previous_syllable():
    key = extract_rhyme_key(*syllabify(("AH0", "B", "AW1", "T")))

    assert key == RhymeKey("UH+OW", ("P", "T"))
    assert key.final_vowel == "OW"


def test_open_stressed_syllable_absorbs_previous_syllable():
    key = extract_rhyme_key(*syllabify(("T", "AH0", "M", "AA1")))

    assert key == RhymeKey("UH+AH", ("M",))


def test_first_syllable_is_never_absorbed():
    key = extract_rhyme_key(*syllabify(("M", "AH1", "N", "IY0")))

    assert key == RhymeKey("UH", ("N",))


def test_trailing_aspirate_is_dropped():
    assert normalize_coda(("HH",)) == ()
    assert normalize_coda(("N", "D", "Z")) == ("N", "T", "S")


def test_no_key_without_syllables():
    assert extract_rhyme_key((), None) is None


def test_multisyllabic_key_joins_tail_phonemes():
    syllables, _ = syllabify(("K", "IY1", "B", "AA0", "T", "OW0"))

    assert multisyllabic_key(syllables, 2) == "AH-T-O"
    assert multisyllabic_key(syllables, 3) == "K-EE-B-AH-T-O"
    assert multisyllabic_key((), 2) is None


def test_rhyme_tail_starts_at_last_vowel():
    assert rhyme_tail(("HH", "AE1", "P", "IY0")) == ("IY0",)
    assert rhyme_tail(("K", "AE1", "T")) == ("AE1", "T")
    assert rhyme_tail(("P", "S", "T")) == ("S", "T")


def test_stressed_vowel_label():
    syllables, stress = syllabify(("HH", "AE1", "P", "IY0"))

    assert stressed_vowel_label(syllables, stress) == "A"
    assert stressed_vowel_label((), None) is None

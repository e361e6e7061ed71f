import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_lab.core.analyzer import RhymeAnalyzer
from rhyme_lab.core.dictionary import PhonemeDictionary


@pytest.fixture
def analyzer():
    """Analyzer with the default configuration and dictionary."""

    return RhymeAnalyzer()


@pytest.fixture
def cross_rhyme_verse():
    return "cat\ndog\nhat\nfog"


@pytest.fixture
def multisyllabic_dictionary():
    """Two made-up words whose final two syllables are identical."""

    return PhonemeDictionary(
        {
            "kibato": ["K", "IY1", "B", "AA0", "T", "OW0"],
            "mabato": ["M", "AE1", "B", "AA0", "T", "OW0"],
        }
    )


@pytest.fixture
def mosaic_dictionary():
    return PhonemeDictionary(
        {
            "orange": ["AO1", "R", "AH0", "N", "JH"],
            "door": ["D", "AO1", "R"],
            "hinge": ["HH", "AH1", "N", "JH"],
        }
    )


@pytest.fixture
def chain_dictionary():
    """One-syllable words for building three-word chains across lines."""

    return PhonemeDictionary(
        {
            "cat": ["K", "AE1", "T"],
            "sat": ["S", "AE1", "T"],
            "hat": ["HH", "AE1", "T"],
            "bat": ["B", "AE1", "T"],
            "mat": ["M", "AE1", "T"],
            "rat": ["R", "AE1", "T"],
            "dog": ["D", "AO1", "G"],
            "fog": ["F", "AO1", "G"],
            "log": ["L", "AO1", "G"],
        }
    )

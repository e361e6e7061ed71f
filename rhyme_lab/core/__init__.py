"""Core phonetic analysis for Rhyme Lab."""

from .analyzer import AnalysisResult, RhymeAnalyzer, analyze
from .config import DEFAULT_CONFIG, AnalysisConfig
from .dictionary import DEFAULT_DICTIONARY, PhonemeDictionary
from .errors import ConfigurationError, RhymeLabError
from .g2p import word_to_phones
from .grouping import AssonanceGroup, RhymeGroup, RhymeSpan
from .hiphop import ArtistProfile, FlowPattern, MosaicRhyme, RhymeChain
from .metrics import GroupMembership, RhymeMetrics
from .rhyme_key import RhymeKey, extract_rhyme_key
from .scorer import MatchStrategy, rhyme_distance, score_rhyme
from .syllables import Syllable, syllabify
from .tokenizer import WordToken, tokenize

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "ArtistProfile",
    "AssonanceGroup",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DEFAULT_DICTIONARY",
    "FlowPattern",
    "GroupMembership",
    "MatchStrategy",
    "MosaicRhyme",
    "PhonemeDictionary",
    "RhymeAnalyzer",
    "RhymeChain",
    "RhymeGroup",
    "RhymeKey",
    "RhymeLabError",
    "RhymeMetrics",
    "RhymeSpan",
    "Syllable",
    "WordToken",
    "analyze",
    "extract_rhyme_key",
    "rhyme_distance",
    "score_rhyme",
    "syllabify",
    "tokenize",
    "word_to_phones",
]

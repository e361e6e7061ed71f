"""Rhyme Lab: heuristic phonetic rhyme detection for lyrics and verse."""

from .core import (
    AnalysisConfig,
    AnalysisResult,
    ConfigurationError,
    MatchStrategy,
    RhymeAnalyzer,
    RhymeLabError,
    analyze,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "AnalysisResult",
    "ConfigurationError",
    "MatchStrategy",
    "RhymeAnalyzer",
    "RhymeLabError",
    "analyze",
    "__version__",
]

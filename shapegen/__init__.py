# ==============================================
# Shapegen — Sample Profiling & Data Generation
# ==============================================
#
# Package Structure (3 Topics + Orchestrator):
#
# shapegen/
# ├── analysis/       # Topic 1: Classify characters into pattern symbols
# ├── profile/        # Topic 2: Aggregate facts, rank patterns, generate
# ├── sources/        # Topic 3: Read samples from CSV files / HTTP
# ├── errors.py       # Error kinds raised by the engine
# ├── config.py       # Configuration management
# ├── generator.py    # Final orchestrator class
# └── cli.py          # Command line entry point
#
# ==============================================

from shapegen.errors import ProfileError, InvalidInput, NotTrained, NoMatchingFact
from shapegen.profile import Fact, FactStore, Profile, RankEntry
from shapegen.analysis import PatternAnalyzer, PatternPlaceholder

__version__ = "0.1.0"

__all__ = [
    "ProfileError",
    "InvalidInput",
    "NotTrained",
    "NoMatchingFact",
    "Fact",
    "FactStore",
    "Profile",
    "RankEntry",
    "PatternAnalyzer",
    "PatternPlaceholder",
]

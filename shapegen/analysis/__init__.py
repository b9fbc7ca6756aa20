# ==============================================
# TOPIC 1: ANALYSIS (Character classification)
# ==============================================
#
# This package turns one raw sample string into its symbolic
# shape BEFORE it enters the profile.
#
# Modules:
# --------
# - placeholder.py       → Classification alphabet (C, c, V, v, #, S, p, ~)
# - pattern_analyzer.py  → Sample → (pattern string, list of Facts)
#
# ==============================================

from .placeholder import PatternPlaceholder
from .pattern_analyzer import PatternAnalyzer

__all__ = ["PatternPlaceholder", "PatternAnalyzer"]

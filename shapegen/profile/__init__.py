# ==============================================
# TOPIC 2: PROFILE (Aggregation & Generation)
# ==============================================
#
# This package accumulates what was observed about the samples
# and generates new strings from it.
#
# Two-step process:
#   Step 1 (Profiling):  Observe samples → pattern / size counts + facts
#   Step 2 (Generation): Rank tables → pick a pattern → rebuild a string
#
# Modules:
# --------
# - fact.py         → Data class for one character's context (a "Fact")
# - fact_store.py   → Partitioned store of Facts, scanned in parallel
# - rank_table.py   → Frequency table → cumulative percentage table
# - profile.py      → The Profile engine itself
#
# ==============================================

from .fact import Fact
from .fact_store import FactStore
from .rank_table import RankEntry, build_rank_table, select_rank
from .profile import Profile

__all__ = [
    "Fact",
    "FactStore",
    "RankEntry",
    "build_rank_table",
    "select_rank",
    "Profile",
]

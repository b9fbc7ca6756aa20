# ==============================================
# Profile
# ==============================================
#
# PURPOSE:
#   Learn the "shape" of a set of sample strings and generate new
#   strings that look like they came from the same set.
#
# LIFECYCLE:
#   1. ingest(sample)   → many times (pattern / size counts + facts)
#   2. finalize()       → build cumulative rank tables
#   3. generate()       → many times (pick a pattern, rebuild a string)
#
#   Ingesting after finalize() drops the rank tables; call finalize()
#   again before generating.
#
# GENERATION:
#   generate() draws r in [0, 100) and picks the first pattern whose
#   cumulative percentage is >= r. reconstruct(pattern) then builds
#   the string left to right. For position i with symbol s:
#
#     candidates = facts with placeholder == s, index_offset == i,
#                  starts_with == (i == 0), ends_with == (i == last)
#
#     weight per candidate = 1
#                          + 2 if its prior_key equals the previously
#                              generated character (blank at i == 0)
#                          + 2 for the exact positional match
#
#   so a plain match weighs 3 and a continuation match weighs 5.
#   A pool with a single distinct character is taken without a draw.
#
# CLASS: Profile
# --------------
#   Constructor:
#   ------------
#   - __init__(partition_count=4, analyzer=None, rng=None,
#              parallel=True, max_workers=None)
#
#   Public Methods:
#   ---------------
#   - ingest(sample) / ingest_batch(samples)
#   - finalize()
#   - generate() / generate_batch(count)
#   - reconstruct(pattern)
#   - reset()
#   - summary()
#
#   Read-only accessors:
#   --------------------
#   patterns, sizes, pattern_total, size_total, pattern_ranks,
#   size_ranks, fact_count, sample_count, partition_count, is_finalized
#
# ==============================================

import random
import threading
from typing import Dict, Iterable, List, Optional

from shapegen.errors import InvalidInput, NoMatchingFact, NotTrained
from shapegen.analysis.pattern_analyzer import PatternAnalyzer
from .fact import Fact
from .fact_store import FactStore
from .rank_table import RankEntry, build_rank_table, select_rank


# Stands in for the "previous character" at position 0
BLANK = " "

CONTINUATION_BONUS = 2
POSITION_BONUS = 2


class Profile:
    """
    Aggregates pattern, size and fact statistics over many samples
    and generates new strings from them.
    """

    def __init__(
        self,
        partition_count: int = 4,
        analyzer: Optional[PatternAnalyzer] = None,
        rng: Optional[random.Random] = None,
        parallel: bool = True,
        max_workers: Optional[int] = None
    ):
        """
        Initialize an empty profile.

        Args:
            partition_count: Number of fact partitions scanned per position
            analyzer: Object with analyze(sample) -> (pattern, facts).
                      Defaults to PatternAnalyzer().
            rng: Random source with random() and randrange(n).
                 Defaults to a new random.Random().
            parallel: Scan partitions on worker threads
            max_workers: Cap on worker threads for the scan
        """
        self._analyzer = analyzer or PatternAnalyzer()
        self._rng = rng if rng is not None else random.Random()
        self._facts = FactStore(partition_count, parallel=parallel, max_workers=max_workers)

        self._patterns: Dict[str, int] = {}
        self._sizes: Dict[int, int] = {}
        self._pattern_ranks: List[RankEntry] = []
        self._size_ranks: List[RankEntry] = []

        # Ingest / finalize / reset are single-writer
        self._write_lock = threading.Lock()

    # ======================================
    # Ingestion
    # ======================================
    def ingest(self, sample: str) -> None:
        """
        Fold one sample into the profile.

        Args:
            sample: Non-empty string

        Raises:
            InvalidInput: If the sample is empty or not a string.
                          The profile is left untouched.
        """
        if not isinstance(sample, str) or sample == "":
            raise InvalidInput("Sample must be a non-empty string")

        pattern, facts = self._analyzer.analyze(sample)

        with self._write_lock:
            self._patterns[pattern] = self._patterns.get(pattern, 0) + 1
            self._sizes[len(sample)] = self._sizes.get(len(sample), 0) + 1
            self._facts.add_sample_facts(facts)

            # Rank tables no longer describe the data
            self._pattern_ranks = []
            self._size_ranks = []

    def ingest_batch(self, samples: Iterable[str]) -> int:
        """
        Ingest several samples in order.

        Stops at the first invalid sample; the ones before it stay ingested.

        Returns:
            Number of samples ingested
        """
        count = 0
        for sample in samples:
            self.ingest(sample)
            count += 1
        return count

    # ======================================
    # Rank tables
    # ======================================
    def finalize(self) -> None:
        """
        Rebuild the pattern and size rank tables from the current counts.

        Safe to call repeatedly: each call replaces the tables.

        Raises:
            NotTrained: If no sample has been ingested
        """
        with self._write_lock:
            if not self._patterns:
                raise NotTrained("Cannot finalize a profile with no ingested samples")
            pattern_ranks = build_rank_table(self._patterns)
            size_ranks = build_rank_table(self._sizes)
            self._pattern_ranks = pattern_ranks
            self._size_ranks = size_ranks

    # ======================================
    # Generation
    # ======================================
    def generate(self) -> str:
        """
        Generate one string.

        Returns:
            A new string shaped like one of the ingested patterns

        Raises:
            NotTrained: If finalize() has not run since the last ingest/reset
            NoMatchingFact: If the chosen pattern cannot be rebuilt
        """
        if not self._pattern_ranks:
            raise NotTrained("Profile is not finalized; ingest samples and call finalize()")

        draw = self._rng.random() * 100.0
        entry = select_rank(self._pattern_ranks, draw)
        return self.reconstruct(entry.key)

    def generate_batch(self, count: int) -> List[str]:
        """Generate `count` strings."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.generate() for _ in range(count)]

    def reconstruct(self, pattern: str) -> str:
        """
        Build a string character by character from the facts matching a pattern.

        Args:
            pattern: Sequence of placeholder symbols

        Returns:
            A string of the same length as the pattern

        Raises:
            InvalidInput: If the pattern is empty
            NotTrained: If the profile has not been finalized
            NoMatchingFact: If some position has no candidate characters
        """
        if not isinstance(pattern, str) or pattern == "":
            raise InvalidInput("Pattern must be a non-empty string")
        if not self._pattern_ranks:
            raise NotTrained("Profile is not finalized; ingest samples and call finalize()")

        last_index = len(pattern) - 1
        generated = []
        prev_char = BLANK

        # One worker pool serves every position of this string
        with self._facts.scan_session() as executor:
            for index, symbol in enumerate(pattern):
                candidates = self._facts.find_matches(
                    symbol,
                    starts_with=index == 0,
                    ends_with=index == last_index,
                    index_offset=index,
                    executor=executor
                )
                pool = self._weighted_pool(candidates, prev_char)
                if not pool:
                    raise NoMatchingFact(pattern, index, symbol)

                prev_char = self._pick(pool)
                generated.append(prev_char)

        return "".join(generated)

    def _weighted_pool(self, candidates: List[Fact], prev_char: str) -> List[str]:
        pool: List[str] = []
        for fact in candidates:
            pool.append(fact.key)

            prior = fact.prior_key if fact.prior_key is not None else BLANK
            if prior == prev_char:
                pool.extend([fact.key] * CONTINUATION_BONUS)

            # Always true under the positional filter above
            pool.extend([fact.key] * POSITION_BONUS)
        return pool

    def _pick(self, pool: List[str]) -> str:
        first = pool[0]
        if all(char == first for char in pool):
            return first
        return pool[self._rng.randrange(len(pool))]

    # ======================================
    # Reset
    # ======================================
    def reset(self) -> None:
        """
        Forget everything: pattern and size tables, rank tables and facts.
        """
        with self._write_lock:
            self._patterns = {}
            self._sizes = {}
            self._pattern_ranks = []
            self._size_ranks = []
            self._facts.clear()

    # ======================================
    # Read-only accessors
    # ======================================
    @property
    def patterns(self) -> Dict[str, int]:
        return dict(self._patterns)

    @property
    def sizes(self) -> Dict[int, int]:
        return dict(self._sizes)

    @property
    def pattern_total(self) -> int:
        return sum(self._patterns.values())

    @property
    def size_total(self) -> int:
        return sum(self._sizes.values())

    @property
    def sample_count(self) -> int:
        return self.pattern_total

    @property
    def pattern_ranks(self) -> List[RankEntry]:
        return list(self._pattern_ranks)

    @property
    def size_ranks(self) -> List[RankEntry]:
        return list(self._size_ranks)

    @property
    def fact_count(self) -> int:
        return len(self._facts)

    @property
    def partition_count(self) -> int:
        return self._facts.partition_count

    @property
    def partition_sizes(self) -> List[int]:
        return self._facts.partition_sizes()

    @property
    def is_finalized(self) -> bool:
        return bool(self._pattern_ranks)

    def summary(self, top: int = 5) -> dict:
        """
        Diagnostic snapshot of the profile.

        Args:
            top: How many of the highest-ranked patterns to include

        Returns:
            Dictionary with counts, partition sizes and top patterns
        """
        return {
            "samples": self.sample_count,
            "distinct_patterns": len(self._patterns),
            "distinct_sizes": len(self._sizes),
            "facts": self.fact_count,
            "partitions": self.partition_sizes,
            "finalized": self.is_finalized,
            "top_patterns": [
                {
                    "pattern": entry.key,
                    "percentage": round(entry.percentage, 4),
                    "cumulative": round(entry.cumulative, 4),
                }
                for entry in self._pattern_ranks[:top]
            ],
        }

# ==============================================
# SampleGenerator — Final Orchestrator
# ==============================================
#
# PURPOSE:
#   This is the MAIN CLASS that ties the 3 topics together.
#   Users interact with this class only.
#
# HOW IT CONNECTS THE 3 TOPICS:
#
#   ┌──────────────────────────────────────────────┐
#   │               SampleGenerator                │
#   │                                              │
#   │  ┌────────────────────────────────────┐      │
#   │  │ TOPIC 3: SOURCES                   │      │
#   │  │  read_column / fetch_samples       │      │
#   │  └──────────────┬─────────────────────┘      │
#   │                 │ raw samples                │
#   │                 ▼                            │
#   │  ┌────────────────────────────────────┐      │
#   │  │ TOPIC 1: ANALYSIS                  │      │
#   │  │  PatternAnalyzer → pattern + facts │      │
#   │  └──────────────┬─────────────────────┘      │
#   │                 │                            │
#   │                 ▼                            │
#   │  ┌────────────────────────────────────┐      │
#   │  │ TOPIC 2: PROFILE                   │      │
#   │  │  ingest → finalize → generate      │      │
#   │  └────────────────────────────────────┘      │
#   └──────────────────────────────────────────────┘
#
#
# CLASS: SampleGenerator
# ----------------------
#   Public Methods (User-facing API):
#   ---------------------------------
#   - ingest(sample) / ingest_batch(samples)
#   - ingest_csv_column(path, column) / ingest_lines(path)
#   - ingest_from_url(url=None, count=100)
#   - prepare()            → finalize the profile
#   - generate(count=1)    → list of generated strings
#   - get_status() / get_pattern_summary(top=10)
#   - reset()
#
# ==============================================

import random
import time
from datetime import datetime
from typing import Iterable, List, Optional, Union

from shapegen.config import AppConfig, get_config
from shapegen.analysis.pattern_analyzer import PatternAnalyzer
from shapegen.profile.profile import Profile
from shapegen.sources.csv_columns import read_column, read_lines
from shapegen.sources.http_source import fetch_samples


class SampleGenerator:
    """
    Main orchestrator: reads samples, profiles them and generates
    look-alike strings.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
        analyzer: Optional[PatternAnalyzer] = None
    ):
        """
        Initialize the generator.

        Args:
            config: Application configuration. If None, loads from environment.
            rng: Random source. If None, one is seeded from the config.
            analyzer: Pattern analyzer. If None, the default PatternAnalyzer.
        """
        self._config = config or get_config()
        profile_config = self._config.profile

        if rng is None:
            rng = random.Random(profile_config.random_seed)

        self._profile = Profile(
            partition_count=profile_config.partition_count,
            analyzer=analyzer or PatternAnalyzer(),
            rng=rng,
            parallel=profile_config.parallel_scan,
            max_workers=profile_config.max_workers
        )
        self._total_generated = 0
        self._last_prepare_time: Optional[float] = None

        self._log(f"✓ Generator initialized (partitions: {profile_config.partition_count}, "
                  f"parallel scan: {profile_config.parallel_scan})")

    @property
    def profile(self) -> Profile:
        return self._profile

    # ======================================
    # Ingestion
    # ======================================
    def ingest(self, sample: str) -> None:
        """Ingest one sample into the profile."""
        self._profile.ingest(sample)

    def ingest_batch(self, samples: Iterable[str]) -> int:
        """
        Ingest several samples.

        Returns:
            Number of samples ingested
        """
        count = self._profile.ingest_batch(samples)
        self._log(f"✓ Ingested {count} samples (total: {self._profile.sample_count})")
        return count

    def ingest_csv_column(self, path: str, column: Union[str, int]) -> int:
        """Ingest every non-empty value of one CSV column."""
        source = self._config.source
        values = read_column(
            path,
            column,
            delimiter=source.csv_delimiter,
            has_headers=source.csv_has_headers
        )
        return self.ingest_batch(values)

    def ingest_lines(self, path: str) -> int:
        """Ingest one sample per non-empty line of a text file."""
        return self.ingest_batch(read_lines(path))

    def ingest_from_url(self, url: Optional[str] = None, count: int = 100) -> int:
        """
        Fetch samples over HTTP and ingest them.

        Args:
            url: Endpoint URL (defaults to the configured sample_url)
            count: Number of samples to fetch
        """
        source = self._config.source
        samples = fetch_samples(
            url or source.sample_url,
            count=count,
            timeout=source.request_timeout_seconds
        )
        return self.ingest_batch(samples)

    # ======================================
    # Generation
    # ======================================
    def prepare(self) -> dict:
        """
        Finalize the profile so it can generate.

        Returns:
            Dictionary with preparation results
        """
        start_time = time.time()
        self._profile.finalize()
        elapsed = time.time() - start_time
        self._last_prepare_time = time.time()

        result = {
            "status": "success",
            "samples": self._profile.sample_count,
            "distinct_patterns": len(self._profile.patterns),
            "distinct_sizes": len(self._profile.sizes),
            "elapsed_seconds": round(elapsed, 3),
            "timestamp": datetime.now().isoformat()
        }
        self._log(f"✓ Ranked {result['distinct_patterns']} patterns from "
                  f"{result['samples']} samples in {elapsed:.2f}s")
        return result

    def generate(self, count: int = 1) -> List[str]:
        """
        Generate strings from the profile, preparing it first if needed.

        Args:
            count: Number of strings to generate

        Returns:
            List of generated strings
        """
        if not self._profile.is_finalized:
            self.prepare()

        generated = self._profile.generate_batch(count)
        self._total_generated += len(generated)
        return generated

    # ======================================
    # Status
    # ======================================
    def get_status(self) -> dict:
        """
        Get current generator status.

        Returns:
            Dictionary with profile state information.
        """
        return {
            "samples_ingested": self._profile.sample_count,
            "distinct_patterns": len(self._profile.patterns),
            "facts_stored": self._profile.fact_count,
            "partition_sizes": self._profile.partition_sizes,
            "finalized": self._profile.is_finalized,
            "total_generated": self._total_generated,
            "seconds_since_prepare": (
                round(time.time() - self._last_prepare_time, 2)
                if self._last_prepare_time is not None else None
            ),
            "timestamp": datetime.now().isoformat()
        }

    def get_pattern_summary(self, top: int = 10) -> dict:
        """
        Get the highest-ranked patterns and sizes.

        Returns:
            Dictionary with the top patterns and size distribution
        """
        if not self._profile.is_finalized:
            self.prepare()

        return {
            "patterns": [
                {
                    "pattern": entry.key,
                    "percentage": round(entry.percentage, 4),
                    "cumulative": round(entry.cumulative, 4)
                }
                for entry in self._profile.pattern_ranks[:top]
            ],
            "sizes": [
                {
                    "size": entry.key,
                    "percentage": round(entry.percentage, 4),
                    "cumulative": round(entry.cumulative, 4)
                }
                for entry in self._profile.size_ranks[:top]
            ],
            "counts": {
                "samples": self._profile.sample_count,
                "patterns": len(self._profile.patterns),
                "sizes": len(self._profile.sizes)
            }
        }

    def reset(self) -> None:
        """Clear the profile and counters."""
        self._profile.reset()
        self._total_generated = 0
        self._last_prepare_time = None
        self._log("✓ Profile reset")

    def _log(self, message: str) -> None:
        if self._config.verbose:
            print(message)

# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - name_samples         → The 7 "Last, First" samples used across tests
# - scripted_rng         → Factory for a random source with fixed draws
# - profile              → Empty single-partition profile (sequential scan)
# - trained_profile      → Profile with name_samples ingested and finalized
# - quiet_config         → AppConfig with status printing switched off
#
# ==============================================

import pytest

from shapegen.config import AppConfig, ProfileConfig, SourceConfig, reset_config
from shapegen.profile import Profile


NAME_SAMPLES = [
    "Smith, John",
    "O'Brian, Henny",
    "Dale, Danny",
    "Rickets, Ronnae",
    "Richard, Richie",
    "Roberts, Blake",
    "Conways, Sephen",
]


class ScriptedRandom:
    """
    Random source that replays fixed draws.

    random() returns the next value of `floats` (cycling);
    randrange(n) returns the next value of `indexes` modulo n (cycling).
    Every call is recorded so tests can check whether randomness was used.
    """

    def __init__(self, floats=(0.0,), indexes=(0,)):
        self.floats = list(floats)
        self.indexes = list(indexes)
        self.float_calls = 0
        self.range_calls = []

    def random(self):
        value = self.floats[self.float_calls % len(self.floats)]
        self.float_calls += 1
        return value

    def randrange(self, n):
        value = self.indexes[len(self.range_calls) % len(self.indexes)] % n
        self.range_calls.append(n)
        return value


# ==============================================
# Test Fixtures
# ==============================================

@pytest.fixture
def name_samples():
    """Fresh copy of the seven name samples."""
    return list(NAME_SAMPLES)


@pytest.fixture
def scripted_rng():
    """Factory: scripted_rng(floats=..., indexes=...)."""
    return ScriptedRandom


@pytest.fixture
def profile():
    """Empty single-partition profile with a sequential scan."""
    return Profile(partition_count=1, parallel=False)


@pytest.fixture
def trained_profile(name_samples):
    """Four-partition profile trained on the name samples."""
    trained = Profile(partition_count=4)
    trained.ingest_batch(name_samples)
    trained.finalize()
    return trained


@pytest.fixture
def quiet_config():
    """Two sequential partitions, seed 7, no status output."""
    return AppConfig(
        profile=ProfileConfig(partition_count=2, parallel_scan=False, random_seed=7),
        source=SourceConfig(),
        verbose=False
    )


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts and ends without a cached config."""
    reset_config()
    yield
    reset_config()

# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - ProfileConfig (dataclass)
#     partition_count: int        (default 4)
#     parallel_scan: bool         (default True)
#     max_workers: int | None     (default None → one worker per partition)
#     random_seed: int | None     (default None → OS entropy)
#
# - SourceConfig (dataclass)
#     csv_delimiter: str          (default ",")
#     csv_has_headers: bool       (default True)
#     sample_url: str             (default "http://127.0.0.1:8000/samples")
#     request_timeout_seconds: float (default 10.0)
#
# - AppConfig (dataclass)
#     profile: ProfileConfig
#     source: SourceConfig
#     verbose: bool               (default True)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Forget the singleton so the next get_config() re-reads the env.
#
# USAGE:
# ------
#   from shapegen.config import get_config
#   config = get_config()
#   print(config.profile.partition_count)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}
FALSE_VARIANTS = {"0", "false", "no", "off"}


@dataclass
class ProfileConfig:
    """Profile engine configuration."""
    partition_count: int = 4
    parallel_scan: bool = True
    max_workers: Optional[int] = None
    random_seed: Optional[int] = None


@dataclass
class SourceConfig:
    """Sample source configuration (CSV files and HTTP endpoint)."""
    csv_delimiter: str = ","
    csv_has_headers: bool = True
    sample_url: str = "http://127.0.0.1:8000/samples"
    request_timeout_seconds: float = 10.0


@dataclass
class AppConfig:
    """Main application configuration."""
    profile: ProfileConfig = field(default_factory=ProfileConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    verbose: bool = True


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VARIANTS:
        return True
    if value in FALSE_VARIANTS:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    # Build profile engine configuration
    profile_config = ProfileConfig(
        partition_count=_env_int("SHAPEGEN_PARTITIONS", 4),
        parallel_scan=_env_bool("SHAPEGEN_PARALLEL_SCAN", True),
        max_workers=_env_int("SHAPEGEN_MAX_WORKERS", None),
        random_seed=_env_int("SHAPEGEN_RANDOM_SEED", None)
    )
    if profile_config.partition_count < 1:
        raise ValueError(
            f"SHAPEGEN_PARTITIONS must be >= 1, got {profile_config.partition_count}"
        )

    # Build sample source configuration
    source_config = SourceConfig(
        csv_delimiter=os.getenv("SHAPEGEN_CSV_DELIMITER", ","),
        csv_has_headers=_env_bool("SHAPEGEN_CSV_HAS_HEADERS", True),
        sample_url=os.getenv("SHAPEGEN_SAMPLE_URL", "http://127.0.0.1:8000/samples"),
        request_timeout_seconds=_env_float("SHAPEGEN_REQUEST_TIMEOUT", 10.0)
    )

    # Build main application configuration
    _config_instance = AppConfig(
        profile=profile_config,
        source=source_config,
        verbose=_env_bool("SHAPEGEN_VERBOSE", True)
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration (mainly for tests)."""
    global _config_instance
    _config_instance = None

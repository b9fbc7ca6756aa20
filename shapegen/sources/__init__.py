# ==============================================
# TOPIC 3: SOURCES (Where samples come from)
# ==============================================
#
# This package reads raw sample strings from outside the
# process so they can be fed into a Profile.
#
# Modules:
# --------
# - csv_columns.py  → Split CSV data into per-column lists of samples
# - http_source.py  → Fetch samples from an HTTP endpoint
#
# ==============================================

from .csv_columns import read_as_columns, read_column, read_lines
from .http_source import fetch_samples

__all__ = ["read_as_columns", "read_column", "read_lines", "fetch_samples"]

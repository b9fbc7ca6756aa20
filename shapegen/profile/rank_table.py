# ==============================================
# Rank Tables
# ==============================================
#
# PURPOSE:
#   Turn a frequency table ({key: count}) into a cumulative
#   percentage table used for roulette-wheel selection.
#
# EXAMPLE:
#   {"Cvc": 2, "Ccv": 1, "Vc": 1}
#     → [("Cvc", 50.0, 50.0), ("Ccv", 25.0, 75.0), ("Vc", 25.0, 100.0)]
#
# ORDERING:
#   Count descending, ties broken by key ascending, so the table is
#   the same on every run and every platform.
#
# FUNCTIONS:
# ----------
# - build_rank_table(counts) -> list[RankEntry]
#     Pure: depends only on `counts`, never on a previous table.
#
# - select_rank(table, value) -> RankEntry
#     First entry whose cumulative percentage is >= value.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, Dict, Hashable, List

from shapegen.errors import NotTrained


# Rounding may leave the last cumulative value a hair under 100.0
CUMULATIVE_EPSILON = 1e-6


@dataclass(frozen=True)
class RankEntry:
    """One row of a rank table."""
    key: Any
    percentage: float  # Share of this key alone
    cumulative: float  # Running total up to and including this key

    def as_tuple(self) -> tuple:
        return (self.key, self.cumulative)


def build_rank_table(counts: Dict[Hashable, int]) -> List[RankEntry]:
    """
    Build a cumulative rank table from occurrence counts.

    Args:
        counts: Mapping of key → number of occurrences

    Returns:
        Entries sorted by count descending (key ascending on ties)

    Raises:
        NotTrained: If the table is empty or its total count is zero
    """
    total = sum(counts.values())
    if total <= 0:
        raise NotTrained("Cannot rank an empty frequency table")

    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    table: List[RankEntry] = []
    running = 0.0
    for key, count in ordered:
        percentage = count / total * 100.0
        running += percentage
        table.append(RankEntry(key=key, percentage=percentage, cumulative=running))

    return table


def select_rank(table: List[RankEntry], value: float) -> RankEntry:
    """
    Roulette-wheel selection over a rank table.

    Args:
        table: Table produced by build_rank_table()
        value: Draw in [0, 100)

    Returns:
        The first entry whose cumulative percentage is >= value

    Raises:
        NotTrained: If the table is empty
    """
    if not table:
        raise NotTrained("Rank table is empty; call finalize() after ingesting samples")

    for entry in table:
        if entry.cumulative >= value:
            return entry

    # Draw landed in the rounding gap above the last cumulative value
    last = table[-1]
    if abs(last.cumulative - 100.0) <= CUMULATIVE_EPSILON:
        return last
    raise ValueError(f"Draw {value} is outside the rank table range (0, {last.cumulative}]")

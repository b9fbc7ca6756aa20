# ==============================================
# Tests for Rank Tables
# ==============================================

import pytest

from shapegen.errors import NotTrained
from shapegen.profile import RankEntry, build_rank_table, select_rank


# ==============================================
# Rank Table Construction Tests
# ==============================================

class TestBuildRankTable:
    """Tests for build_rank_table."""

    def test_sorted_by_count_then_key(self):
        """Higher counts first; ties broken by ascending key."""
        table = build_rank_table({"b": 1, "a": 1, "c": 2})
        assert [entry.key for entry in table] == ["c", "a", "b"]
        assert [entry.percentage for entry in table] == pytest.approx([50.0, 25.0, 25.0])
        assert [entry.cumulative for entry in table] == pytest.approx([50.0, 75.0, 100.0])

    def test_integer_keys(self):
        """Size tables rank integer keys the same way."""
        table = build_rank_table({6: 1, 11: 4, 12: 2})
        assert [entry.key for entry in table] == [11, 12, 6]
        assert [entry.cumulative for entry in table] == pytest.approx(
            [57.14285714285714, 85.71428571428571, 100.0]
        )

    def test_cumulative_non_decreasing_and_ends_at_100(self):
        """Cumulative percentages climb to 100."""
        counts = {f"k{i}": (i % 5) + 1 for i in range(37)}
        table = build_rank_table(counts)
        cumulative = [entry.cumulative for entry in table]
        percentages = [entry.percentage for entry in table]
        assert cumulative == sorted(cumulative)
        assert percentages == sorted(percentages, reverse=True)
        assert abs(cumulative[-1] - 100.0) <= 1e-6

    def test_pure_function(self):
        """Same counts give the same table; the input is not mutated."""
        counts = {"a": 3, "b": 1}
        assert build_rank_table(counts) == build_rank_table(counts)
        assert counts == {"a": 3, "b": 1}

    def test_empty_table_not_trained(self):
        """No counts means nothing to rank."""
        with pytest.raises(NotTrained):
            build_rank_table({})

    def test_zero_total_not_trained(self):
        """All-zero counts cannot be turned into percentages."""
        with pytest.raises(NotTrained):
            build_rank_table({"a": 0})


# ==============================================
# Rank Selection Tests
# ==============================================

class TestSelectRank:
    """Tests for select_rank."""

    @pytest.fixture
    def table(self):
        """Two keys at 50% each."""
        return build_rank_table({"a": 1, "b": 1})

    def test_first_entry_at_or_above_draw(self, table):
        """The first entry whose cumulative reaches the draw wins."""
        assert select_rank(table, 0.0).key == "a"
        assert select_rank(table, 50.0).key == "a"
        assert select_rank(table, 50.0001).key == "b"
        assert select_rank(table, 99.99).key == "b"

    def test_rounding_gap_returns_last_entry(self):
        """A draw just past a 99.999... total still picks the last entry."""
        table = [
            RankEntry("x", 50.0, 50.0),
            RankEntry("y", 49.99999999999997, 99.99999999999997),
        ]
        assert select_rank(table, 99.99999999999999).key == "y"

    def test_draw_beyond_short_table(self):
        """A draw well past the last cumulative value is an error."""
        with pytest.raises(ValueError):
            select_rank([RankEntry("x", 50.0, 50.0)], 75.0)

    def test_empty_table_not_trained(self):
        """Selecting from an empty table means the profile was not finalized."""
        with pytest.raises(NotTrained):
            select_rank([], 10.0)

    def test_as_tuple(self):
        """as_tuple gives (key, cumulative)."""
        assert RankEntry("x", 25.0, 75.0).as_tuple() == ("x", 75.0)

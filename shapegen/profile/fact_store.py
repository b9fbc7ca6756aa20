# ==============================================
# FactStore
# ==============================================
#
# PURPOSE:
#   Hold every Fact the profile has learned, split into a fixed
#   number of partitions so that a lookup can scan the partitions
#   side by side.
#
# INSERTION POLICY:
#   The facts of ONE sample are spread round-robin, starting at
#   partition 0 on every call:
#       fact i of the call → partition (i % partition_count)
#   There is no counter carried between calls.
#
# SCANNING:
#   scan(predicate) runs one task per partition on a
#   ThreadPoolExecutor. scan_session() opens one pool that a caller
#   reuses for a series of scans (e.g. every position of one
#   reconstructed string); the `with` block joins every task before
#   it exits. Results are merged in partition order, so a parallel
#   scan returns the same list as a sequential one.
#
# CLASS: FactStore
# ----------------
#   Constructor:
#   ------------
#   - __init__(partition_count=4, parallel=True, max_workers=None)
#
#   Methods:
#   --------
#   - add_sample_facts(facts) -> None
#   - scan_session() -> context manager yielding an executor (or None)
#   - scan(predicate, executor=None) -> list[Fact]
#   - find_matches(placeholder, starts_with, ends_with, index_offset,
#                  executor=None) -> list[Fact]
#   - partition_sizes() -> list[int]
#   - clear() -> None
#
# ==============================================

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, List, Optional

from .fact import Fact


class FactStore:
    """Partitioned, append-only store of Facts."""

    def __init__(
        self,
        partition_count: int = 4,
        parallel: bool = True,
        max_workers: Optional[int] = None
    ):
        """
        Initialize an empty store.

        Args:
            partition_count: Number of partitions (must be >= 1)
            parallel: Scan partitions on worker threads when more than one exists
            max_workers: Cap on worker threads (defaults to one per partition)
        """
        if partition_count < 1:
            raise ValueError(f"partition_count must be >= 1, got {partition_count}")
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self.partition_count = partition_count
        self.parallel = parallel
        self.max_workers = max_workers
        self.partitions: List[List[Fact]] = [[] for _ in range(partition_count)]

    def add_sample_facts(self, facts: Iterable[Fact]) -> None:
        """
        Distribute the facts of one sample across the partitions.

        Args:
            facts: Facts in sample order
        """
        for index, fact in enumerate(facts):
            self.partitions[index % self.partition_count].append(fact)

    @contextmanager
    def scan_session(self) -> Iterator[Optional[ThreadPoolExecutor]]:
        """
        Open one worker pool for a series of scans.

        Every task is joined when the `with` block exits. Yields None
        when scanning is sequential.

        Usage:
            with store.scan_session() as executor:
                store.find_matches("v", False, False, 1, executor=executor)
        """
        if not self.parallel or self.partition_count == 1:
            yield None
            return

        workers = self.max_workers or self.partition_count
        with ThreadPoolExecutor(max_workers=workers) as executor:
            yield executor

    def scan(
        self,
        predicate: Callable[[Fact], bool],
        executor: Optional[ThreadPoolExecutor] = None
    ) -> List[Fact]:
        """
        Collect every fact accepted by the predicate.

        Args:
            predicate: Function deciding whether a fact matches
            executor: Pool from scan_session(); without one a parallel
                      store opens a pool for this call only

        Returns:
            Matching facts, partition 0 first, insertion order within a partition
        """
        if executor is None and self.parallel and self.partition_count > 1:
            with self.scan_session() as own_executor:
                return self.scan(predicate, own_executor)

        def scan_partition(partition: List[Fact]) -> List[Fact]:
            return [fact for fact in partition if predicate(fact)]

        if executor is None:
            results = [scan_partition(partition) for partition in self.partitions]
        else:
            futures = [
                executor.submit(scan_partition, partition)
                for partition in self.partitions
            ]
            # Collect in submission order, not completion order
            results = [future.result() for future in futures]

        matches: List[Fact] = []
        for partition_matches in results:
            matches.extend(partition_matches)
        return matches

    def find_matches(
        self,
        placeholder: str,
        starts_with: bool,
        ends_with: bool,
        index_offset: int,
        executor: Optional[ThreadPoolExecutor] = None
    ) -> List[Fact]:
        """Return the facts that can fill one position of a pattern."""
        return self.scan(
            lambda fact: fact.matches(placeholder, starts_with, ends_with, index_offset),
            executor
        )

    def partition_sizes(self) -> List[int]:
        return [len(partition) for partition in self.partitions]

    def clear(self) -> None:
        self.partitions = [[] for _ in range(self.partition_count)]

    def __len__(self) -> int:
        return sum(self.partition_sizes())

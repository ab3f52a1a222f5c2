"""Banzhaf power index of a weighted voting game, found by backtracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

MIN_VOTERS = 3
MAX_VOTERS = 12


@dataclass(frozen=True)
class Coalition:
    """A winning coalition over the (descending) list of voter weights."""

    weights: tuple[int, ...]
    included: tuple[bool, ...]
    critical: tuple[bool, ...]

    @property
    def votes(self) -> tuple[int, ...]:
        """Each voter's weight if it is in the coalition, else 0."""
        return tuple(w if inc else 0 for w, inc in zip(self.weights, self.included))

    @property
    def size(self) -> int:
        return len(self.weights)

    def members(self) -> tuple[int, ...]:
        """Indices of the voters taking part in the coalition."""
        return tuple(i for i, inc in enumerate(self.included) if inc)

    def total(self) -> int:
        """Sum of the weights of the coalition's members."""
        return sum(self.votes)


@dataclass
class BanzhafResult:
    """Outcome of a Banzhaf analysis."""

    weights: tuple[int, ...]
    quota: int
    coalitions: list[Coalition] = field(default_factory=list)
    critical_votes: tuple[int, ...] = ()
    total_nodes: int = 0

    def total_critical(self) -> int:
        """Total number of critical appearances over all voters."""
        return sum(self.critical_votes)

    def power_index(self) -> tuple[float, ...]:
        """Normalised Banzhaf index of each voter; all zero if nobody is critical."""
        total = self.total_critical()
        if total == 0:
            return tuple(0.0 for _ in self.critical_votes)
        return tuple(count / total for count in self.critical_votes)

    def solution_count(self) -> int:
        """Number of winning coalitions found."""
        return len(self.coalitions)


class _Search:
    def __init__(self, weights: tuple[int, ...], quota: int) -> None:
        self.weights = weights
        self.quota = quota
        self.included = [False] * len(weights)
        self.critical = [0] * len(weights)
        self.coalitions: list[Coalition] = []
        self.nodes = 0

    def run(self, total: int) -> None:
        self._backtrack(0, 0, total)

    def _record(self) -> None:
        total = sum(w for w, inc in zip(self.weights, self.included) if inc)
        flags = []
        for i, (w, inc) in enumerate(zip(self.weights, self.included)):
            is_critical = inc and total - w < self.quota
            if is_critical:
                self.critical[i] += 1
            flags.append(is_critical)
        self.coalitions.append(
            Coalition(self.weights, tuple(self.included), tuple(flags))
        )

    def _backtrack(self, i: int, current: int, remaining: int) -> None:
        self.nodes += 1
        if i == len(self.weights):
            if current >= self.quota:
                self._record()
            return
        if current + remaining < self.quota:
            return
        weight = self.weights[i]
        self.included[i] = True
        self._backtrack(i + 1, current + weight, remaining - weight)
        self.included[i] = False
        self._backtrack(i + 1, current, remaining - weight)


def banzhaf(weights: Iterable[int], quota: int) -> BanzhafResult:
    """Enumerate winning coalitions and count critical voters.

    Weights are sorted in descending order before the search. Raises
    ValueError for fewer than 3 or more than 12 voters, or a quota that is
    not positive. A quota above the total weight yields an empty result.
    """
    ordered: Sequence[int] = sorted((int(w) for w in weights), reverse=True)
    n = len(ordered)
    if not MIN_VOTERS <= n <= MAX_VOTERS:
        raise ValueError(
            f"number of voters must be between {MIN_VOTERS} and {MAX_VOTERS}, got {n}"
        )
    if quota <= 0:
        raise ValueError(f"quota must be positive, got {quota}")

    frozen = tuple(ordered)
    total = sum(frozen)
    if quota > total:
        return BanzhafResult(frozen, quota, [], tuple(0 for _ in frozen), 0)

    search = _Search(frozen, quota)
    search.run(total)
    return BanzhafResult(
        frozen, quota, search.coalitions, tuple(search.critical), search.nodes
    )
"""Per-window next-character frequency tables."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class CharRecord:
    """Snapshot of one observed character and its learned probabilities."""
    char: str
    count: int
    p: Optional[float] = None
    cp: Optional[float] = None

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class CharDistribution:
    """Counts of the characters seen after one window, in first-seen order.

    Counts are accumulated with `record`, turned into probabilities with
    `finalize_probabilities` and drawn from with `sample`. Callers only ever
    see immutable `CharRecord` snapshots.
    """

    def __init__(self):
        # dicts keep insertion order, which is the first-observed order
        self._counts: Dict[str, int] = {}
        self._p: List[float] = []
        self._cp: List[float] = []
        self._finalized = False

    def record(self, char: str) -> None:
        """Count one occurrence of `char` after this window."""
        self._counts[char] = self._counts.get(char, 0) + 1
        self._finalized = False

    def finalize_probabilities(self) -> None:
        """Compute p and cumulative p for every record in stored order."""
        total = self.total_count
        if total == 0:
            return

        p, cp = [], []
        running = 0.0
        for count in self._counts.values():
            prob = count / total
            running += prob
            p.append(prob)
            cp.append(running)
        # absorb floating point drift
        cp[-1] = 1.0

        self._p = p
        self._cp = cp
        self._finalized = True

    def sample(self, draw: float) -> str:
        """Map a uniform draw in [0, 1) to a character.

        Returns the first character whose cumulative probability is strictly
        greater than `draw`, or the last character if none is.
        """
        if not self._counts:
            raise ValueError("Cannot sample from an empty distribution")
        if not self._finalized:
            raise RuntimeError("Probabilities have not been finalized")

        for char, cp in zip(self._counts, self._cp):
            if draw < cp:
                return char
        return char

    @property
    def total_count(self) -> int:
        return sum(self._counts.values())

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def records(self) -> Tuple[CharRecord, ...]:
        """Read-only snapshot of the records in stored order."""
        if not self._finalized:
            return tuple(CharRecord(c, n) for c, n in self._counts.items())
        return tuple(
            CharRecord(c, n, p, cp)
            for (c, n), p, cp in zip(self._counts.items(), self._p, self._cp)
        )

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, char: str) -> bool:
        return char in self._counts

    def __str__(self) -> str:
        return "(" + " ".join(str(r) for r in self.records()) + ")"

    def __repr__(self) -> str:
        return f"CharDistribution({self._counts!r})"

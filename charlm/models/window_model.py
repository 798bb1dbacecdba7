"""Window to next-character distribution mapping."""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from charlm.models.distribution import CharDistribution


class WindowModel:
    """Maps every window seen in training to its `CharDistribution`."""

    def __init__(self, window_length: int):
        if window_length < 0:
            raise ValueError(f"window_length must be >= 0, got {window_length}")
        self._window_length = window_length
        self._table: Dict[str, CharDistribution] = {}

    @property
    def window_length(self) -> int:
        return self._window_length

    def distribution_for(self, window: str) -> CharDistribution:
        """Return the distribution for `window`, creating it if needed."""
        dist = self._table.get(window)
        if dist is None:
            dist = CharDistribution()
            self._table[window] = dist
        return dist

    def get(self, window: str) -> Optional[CharDistribution]:
        return self._table.get(window)

    def finalize(self) -> None:
        for dist in self._table.values():
            dist.finalize_probabilities()

    def windows(self) -> Iterator[str]:
        return iter(self._table)

    def as_mapping(self) -> Mapping[str, CharDistribution]:
        """Read-only view of the underlying table."""
        return MappingProxyType(self._table)

    def __contains__(self, window: str) -> bool:
        return window in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __str__(self) -> str:
        return "".join(f"{window} : {dist}\n" for window, dist in self._table.items())

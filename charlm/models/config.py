"""Model configuration."""

from dataclasses import dataclass
from typing import Optional

from charlm.utils.random_source import TorchRandomSource


# Seed used for reproducible (non-"random") generation
FIXED_SEED = 20
RANDOM_MODE = 'random'


@dataclass(frozen=True)
class ModelConfig:
    """Configuration for the language model."""
    window_length: int
    seed: Optional[int] = None

    def __post_init__(self):
        if self.window_length < 0:
            raise ValueError(f"window_length must be >= 0, got {self.window_length}")

    @classmethod
    def from_mode(cls, window_length: int, mode: str) -> 'ModelConfig':
        """Unseeded for the 'random' mode, fixed seed for anything else."""
        seed = None if mode == RANDOM_MODE else FIXED_SEED
        return cls(window_length=window_length, seed=seed)

    @property
    def reproducible(self) -> bool:
        return self.seed is not None

    def make_random_source(self) -> TorchRandomSource:
        return TorchRandomSource(self.seed)

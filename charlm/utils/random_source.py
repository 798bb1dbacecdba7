"""Sources of uniform random draws for sampling."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import torch


logger = logging.getLogger(__name__)


class RandomSource(ABC):
    """Produces uniformly distributed floats in [0, 1)."""

    @abstractmethod
    def draw(self) -> float:
        """Return the next draw."""


class TorchRandomSource(RandomSource):
    """Random source backed by a dedicated `torch.Generator`.

    Seeded sources repeat the same sequence of draws; unseeded ones are
    seeded non-deterministically.
    """

    def __init__(self, seed: Optional[int] = None):
        self.generator = torch.Generator()
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.generator.manual_seed(seed)
            self.seed = seed
        logger.debug(f"Random source seeded with {self.seed}")

    def draw(self) -> float:
        return torch.rand(1, generator=self.generator, dtype=torch.float64).item()

"""Character-level n-gram language model."""

from typing import Optional

from charlm.data.corpus import CharStream
from charlm.models.window_model import WindowModel
from charlm.utils.random_source import RandomSource, TorchRandomSource
from charlm.utils.trainer import Trainer, Generator


class LanguageModel:
    """Learns next-character distributions for fixed-length windows.

    Train once with `train`, then call `generate` as often as needed. Pass a
    seeded random source for reproducible output; without one the model
    draws from an unseeded `TorchRandomSource`.
    """

    def __init__(self, window_length: int, random_source: Optional[RandomSource] = None):
        self.window_model = WindowModel(window_length)
        self.random_source = random_source if random_source is not None else TorchRandomSource()

    @property
    def window_length(self) -> int:
        return self.window_model.window_length

    def train(self, stream: CharStream) -> int:
        """Build the model from a corpus stream; returns characters consumed."""
        return Trainer(self.window_model).train(stream)

    def generate(self, seed_text: str, target_length: int) -> str:
        return Generator(self.window_model, self.random_source).generate(seed_text, target_length)

    def __str__(self) -> str:
        return str(self.window_model)

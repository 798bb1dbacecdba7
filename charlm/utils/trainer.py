"""Utilities for training and generation."""

import logging

from charlm.data.corpus import CharStream
from charlm.models.window_model import WindowModel
from charlm.utils.random_source import RandomSource


logger = logging.getLogger(__name__)


def trailing(text: str, length: int) -> str:
    """Last `length` characters of `text` (empty for length 0)."""
    return text[len(text) - length:]


class Trainer:
    """Sliding-window counting over a character stream."""

    def __init__(self, model: WindowModel):
        """
        Args:
            model: The window model to populate
        """
        self.model = model

    def train(self, stream: CharStream) -> int:
        """Count every (window, next character) pair in the stream.

        Returns the number of characters consumed. Counts accumulate on top
        of whatever the model already holds.
        """
        window_length = self.model.window_length
        window = ''
        for _ in range(window_length):
            if stream.is_empty():
                logger.debug(
                    f"Corpus shorter than window length {window_length}, nothing learned"
                )
                return len(window)
            window += stream.read_char()

        consumed = len(window)
        while not stream.is_empty():
            char = stream.read_char()
            self.model.distribution_for(window).record(char)
            window = trailing(window + char, window_length)
            consumed += 1

        self.model.finalize()
        logger.info(f"Trained on {consumed} characters: {len(self.model)} distinct windows")
        return consumed


class Generator:
    """Text generation helper for window models."""

    def __init__(self, model: WindowModel, random_source: RandomSource):
        """
        Args:
            model: Trained window model
            random_source: Source of uniform draws used for sampling
        """
        self.model = model
        self.random_source = random_source

    def generate(self, seed_text: str, target_length: int) -> str:
        """Extend `seed_text` until it is `target_length` characters long.

        Stops early when the current window was never seen in training.
        Seeds shorter than the window length are returned unchanged.
        """
        window_length = self.model.window_length
        if len(seed_text) < window_length:
            return seed_text

        generated = seed_text
        window = trailing(generated, window_length)
        while len(generated) < target_length:
            dist = self.model.get(window)
            if dist is None:
                logger.debug(f"No continuation for window {window!r}, stopping at {len(generated)}")
                break
            generated += dist.sample(self.random_source.draw())
            window = trailing(generated, window_length)
        return generated

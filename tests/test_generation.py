"""
Tests for Generator and LanguageModel

Covers generation boundaries, early termination and seeded determinism.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from charlm.data.corpus import CharStream
from charlm.models.language_model import LanguageModel
from charlm.utils.random_source import RandomSource, TorchRandomSource
from charlm.utils.trainer import Generator


CORPUS = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    "the epoch of incredulity, it was the season of Light, it was the season of "
    "Darkness, it was the spring of hope, it was the winter of despair."
)


class ScriptedRandomSource(RandomSource):
    """Replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def draw(self):
        value = self.draws[self.calls]
        self.calls += 1
        return value


def trained(text, window_length, random_source=None):
    model = LanguageModel(window_length, random_source)
    model.train(CharStream.from_text(text))
    return model


class TestGenerate(unittest.TestCase):
    """Tests for text generation."""

    def test_repeating_corpus(self):
        """Certain successors reproduce the corpus regardless of draws."""
        model = trained("abcabcabcabc", 3)
        self.assertEqual(model.generate("abc", 9), "abcabcabc")

    def test_single_character_corpus(self):
        """'aaaa' with window 1 extends 'a' to 'aaaaa'."""
        model = trained("aaaa", 1)
        self.assertEqual(model.generate("a", 5), "aaaaa")

    def test_unseen_window_stops_immediately(self):
        """A seed whose window was never learned is returned unchanged."""
        model = trained("abcdabcd", 2)
        self.assertEqual(model.generate("xy", 20), "xy")

    def test_seed_shorter_than_window(self):
        """Seeds shorter than the window cannot be extended."""
        model = trained(CORPUS, 4)
        self.assertEqual(model.generate("it", 50), "it")

    def test_seed_already_long_enough(self):
        """No characters are appended when the seed meets the target."""
        model = trained(CORPUS, 2)
        self.assertEqual(model.generate("it was", 6), "it was")
        self.assertEqual(model.generate("it was", 3), "it was")

    def test_reaches_target_length(self):
        """Generation stops exactly at the target length."""
        model = trained("abababab", 1)
        self.assertEqual(model.generate("a", 7), "abababa")

    def test_uses_trailing_window_of_seed(self):
        """Only the last window_length characters of the seed matter."""
        model = trained("abcabcabcabc", 3)
        self.assertEqual(model.generate("zzzabc", 9), "zzzabcabc")

    def test_scripted_draws(self):
        """Each generated character consumes one draw."""
        source = ScriptedRandomSource([0.2, 0.9, 0.7])
        model = trained("abac", 1, source)
        self.assertEqual(model.generate("a", 4), "abac")
        self.assertEqual(source.calls, 3)

    def test_stops_on_dead_end(self):
        """Running into an unlearned window returns the partial text."""
        source = ScriptedRandomSource([0.7])
        model = trained("abac", 1, source)
        self.assertEqual(model.generate("a", 10), "ac")

    def test_empty_model(self):
        """An untrained model never extends its seed."""
        model = trained("ab", 3)
        self.assertEqual(model.generate("abc", 10), "abc")

    def test_zero_window(self):
        """Window length 0 samples from the unigram distribution."""
        model = trained("aaaa", 0)
        self.assertEqual(model.generate("", 3), "aaa")

    def test_output_characters_come_from_corpus(self):
        """Generated characters were all seen in training."""
        model = trained(CORPUS, 3, TorchRandomSource(7))
        text = model.generate("it was", 200)
        self.assertLessEqual(len(text), 200)
        self.assertTrue(set(text) <= set(CORPUS))

    def test_generator_directly(self):
        """Generator works on a bare window model."""
        model = trained("abcabcabcabc", 3)
        generator = Generator(model.window_model, ScriptedRandomSource([0.5] * 10))
        self.assertEqual(generator.generate("bca", 6), "bcabca")


class TestDeterminism(unittest.TestCase):
    """Tests for reproducible generation."""

    def test_same_seed_same_text(self):
        """Identical seeds and corpora produce identical output."""
        first = trained(CORPUS, 2, TorchRandomSource(20))
        second = trained(CORPUS, 2, TorchRandomSource(20))
        self.assertEqual(first.generate("it", 150), second.generate("it", 150))

    def test_default_source_is_unseeded(self):
        """Models built without a source still generate valid text."""
        model = trained(CORPUS, 3)
        self.assertIsInstance(model.random_source, TorchRandomSource)
        self.assertTrue(model.generate("the", 40).startswith("the"))

    def test_negative_window_rejected(self):
        """Negative window lengths are invalid."""
        with self.assertRaises(ValueError):
            LanguageModel(-2)


if __name__ == '__main__':
    unittest.main()

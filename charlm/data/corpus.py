"""Corpus reading utilities."""

from pathlib import Path
from typing import Iterable, Iterator, Union


def read_corpus(path: Union[str, Path]) -> str:
    """Read a corpus file verbatim, line endings included."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


class CharStream:
    """Single-pass stream of characters with one character of lookahead."""

    _EMPTY = object()

    def __init__(self, chars: Iterable[str]):
        """
        Args:
            chars: Any iterable of single characters (a str works)
        """
        self._it: Iterator[str] = iter(chars)
        self._next = next(self._it, self._EMPTY)

    @classmethod
    def from_text(cls, text: str) -> 'CharStream':
        return cls(text)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'CharStream':
        """Open a corpus file as a character stream."""
        return cls(read_corpus(path))

    def is_empty(self) -> bool:
        return self._next is self._EMPTY

    def read_char(self) -> str:
        """Consume and return the next character."""
        if self.is_empty():
            raise EOFError("Character stream is exhausted")
        char = self._next
        self._next = next(self._it, self._EMPTY)
        return char

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.is_empty():
            raise StopIteration
        return self.read_char()

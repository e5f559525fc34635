from abc import ABC, abstractmethod
from typing import TextIO


class SongSource(ABC):
    """Abstract base class for the places a chord sheet can be read from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, ref: str) -> bool:
        """Return True if this source can open the given song reference."""

    @abstractmethod
    def open(self, ref: str) -> TextIO:
        """Open *ref* and return a text stream of its lines.

        The stream is a context manager; callers iterate it line by line.

        Raises SongSourceError if the song cannot be opened.
        """

"""Chord sheets stored on the local filesystem.

Files are read as UTF-8.  Chord sheets collected over the years are often
Latin-1 or Windows-1252, so undecodable bytes are replaced rather than
failing the whole song.
"""

from typing import TextIO

from ..exceptions import SongSourceError
from .base import SongSource


class FileSource(SongSource):
    """Source for plain file paths; the fallback for any non-URL reference."""

    @classmethod
    def can_handle(cls, ref: str) -> bool:
        return "://" not in ref

    def open(self, ref: str) -> TextIO:
        try:
            return open(ref, encoding="utf-8", errors="replace")
        except OSError as exc:
            raise SongSourceError(ref, exc.strerror or str(exc)) from exc

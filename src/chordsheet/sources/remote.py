"""Chord sheets served over HTTP(S), e.g. a raw file in a song repository.

The whole response body is fetched up front; the parser then pulls lines
from an in-memory stream.
"""

import io
from typing import TextIO

import httpx

from ..exceptions import FetchError
from .base import SongSource


class HttpSource(SongSource):
    """Source for ``http://`` and ``https://`` URLs."""

    @classmethod
    def can_handle(cls, ref: str) -> bool:
        return ref.startswith(("http://", "https://"))

    def open(self, ref: str) -> TextIO:
        try:
            resp = httpx.get(ref, follow_redirects=True, timeout=15)
        except httpx.RequestError as exc:
            raise FetchError(ref, 0) from exc
        if resp.status_code != 200:
            raise FetchError(ref, resp.status_code)
        return io.StringIO(resp.text)

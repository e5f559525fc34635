from .exceptions import UnsupportedSourceError
from .sources.base import SongSource
from .sources.local import FileSource
from .sources.remote import HttpSource

_SOURCES: list[type[SongSource]] = [
    HttpSource,
    FileSource,
]


def get_source(ref: str) -> SongSource:
    """Return an instantiated source for the given song reference.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(ref):
            return cls()
    raise UnsupportedSourceError(ref)

class ChordSheetError(Exception):
    """Base exception for chordsheet."""


class SongSourceError(ChordSheetError):
    """Raised when a song source cannot be opened or read."""

    def __init__(self, ref: str, reason: str):
        self.ref = ref
        self.reason = reason
        super().__init__(f"Cannot read song {ref}: {reason}")


class FetchError(SongSourceError):
    """Raised when an HTTP request for a song source fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(url, f"HTTP {status_code}")


class UnsupportedSourceError(SongSourceError):
    """Raised when no source adapter matches the given song reference."""

    def __init__(self, ref: str):
        super().__init__(ref, "no source adapter for this reference")


class DefineSyntaxError(ChordSheetError):
    """Raised when a ``{define: ...}`` argument does not match the grammar."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Bad chord definition {text!r}: {reason}")

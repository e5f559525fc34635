from dataclasses import dataclass, field

# Barre fret followed by the six string positions, low E first.
# -1 is muted, 0 is open, n > 0 is fretted at row n and None means
# "no data" for that string.
Frets = tuple[int | None, ...]


@dataclass(frozen=True)
class Title:
    text: str


@dataclass(frozen=True)
class SubTitle:
    text: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class ChordDefinition:
    """A chord shape declared by the song itself with ``{define: ...}``."""

    name: str
    frets: Frets


@dataclass(frozen=True)
class LyricLine:
    """A lyric line split into alternating text and chord segments.

    Example: "La[C]la[G]la" becomes ``("La", "C", "la", "G", "la")``.
    Even indices are lyric text, odd indices are chord names, and there is
    always one more text segment than chord segments.
    """

    segments: tuple[str, ...]

    @property
    def chords(self) -> tuple[str, ...]:
        return self.segments[1::2]

    @property
    def texts(self) -> tuple[str, ...]:
        return self.segments[0::2]


ChordExpression = Title | SubTitle | Comment | ChordDefinition | LyricLine


@dataclass
class SongState:
    """Mutable state for rendering a single song. Never shared between songs."""

    y: float
    local_chords: dict[str, Frets] = field(default_factory=dict)
    used_chords: set[str] = field(default_factory=set)

"""Vertical layout of song lines and chord-over-lyric justification.

Every line moves the song's cursor down the page before it is drawn.  Lyric
lines carry chord names raised above the baseline; when a chord name is
wider than the lyric text under it, that text is stretched so the next
chord still lands over the right syllable.  In ``"[Cmaj7]I [G]know"`` the lyric
``"I "`` is far narrower than ``Cmaj7``, so it is drawn with extra character
spacing and ``G`` ends up over ``know`` instead of crowding ``Cmaj7``.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from .models import LyricLine, SongState
from .surface import Surface

LEFT_MARGIN = 50.0
TOP_MARGIN = 30.0


class LineStyle(NamedTuple):
    font: str
    size: float
    advance: float  # how far the cursor moves down before the line is drawn


TITLE_STYLE = LineStyle("Times-Bold", 18.0, 20.0)
SUBTITLE_STYLE = LineStyle("Times-Italic", 16.0, 18.0)
COMMENT_STYLE = LineStyle("Times-Italic", 14.0, 14.0)
LYRIC_STYLE = LineStyle("Times-Roman", 16.0, 18.0)

CHORD_FONT = "Helvetica-Oblique"
CHORD_SIZE = 14.0
CHORD_RISE = 14.0
# Extra room above a lyric line that has chords on it.
CHORD_ROW_HEIGHT = 12.0

# Chord names need more horizontal room than their bare glyph width to read
# as sitting over a syllable.  Tuned by eye; treat as a visual parameter.
CHORD_WIDTH_FACTOR = 1.4


@dataclass(frozen=True)
class Placement:
    """Where and how one lyric-line segment is drawn."""

    x: float
    text: str
    is_chord: bool = False
    char_space: float = 0.0
    word_space: float = 0.0


def justify(
    segments: Sequence[str],
    measure: Callable[[str, str, float], float],
    left: float = LEFT_MARGIN,
) -> list[Placement]:
    """Place the alternating text/chord *segments* of one lyric line.

    Chords sit at the current x and do not advance it.  A text segment that
    is narrower than the (scaled) chord above it gets the difference as
    one-shot extra spacing: between words if it has an inner space,
    otherwise between characters.  The final segment is never stretched.

    Args:
        segments: ``[text0, chord0, text1, ..., textN]``.
        measure:  ``measure(text, font, size) -> width`` in points.
        left:     x of the first segment.
    """
    placements: list[Placement] = []
    x = left
    last_chord_width = 0.0
    last = len(segments) - 1

    for i, segment in enumerate(segments):
        if i % 2 == 1:
            placements.append(Placement(x, segment, is_chord=True))
            last_chord_width = measure(segment, CHORD_FONT, CHORD_SIZE) * CHORD_WIDTH_FACTOR
            continue

        text = segment or " "
        width = measure(text, LYRIC_STYLE.font, LYRIC_STYLE.size)
        char_space = word_space = 0.0
        deficit = last_chord_width - width
        if deficit > 0 and i != last:
            if " " in text.strip():
                word_space = deficit / text.count(" ")
            else:
                char_space = deficit / len(text)
            width += deficit

        placements.append(Placement(x, text, char_space=char_space, word_space=word_space))
        x += width
        last_chord_width = 0.0

    return placements


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


def draw_text_line(surface: Surface, state: SongState, text: str, style: LineStyle) -> None:
    """Advance the cursor and draw a single plain line (title, comment, ...)."""
    state.y -= style.advance
    surface.draw_text(LEFT_MARGIN, state.y, text, style.font, style.size)


def draw_lyric_line(surface: Surface, state: SongState, line: LyricLine) -> None:
    """Advance the cursor and draw a lyric line with its chords above it."""
    state.y -= LYRIC_STYLE.advance
    if line.chords:
        state.y -= CHORD_ROW_HEIGHT

    for p in justify(line.segments, surface.string_width):
        if p.is_chord:
            surface.draw_text(p.x, state.y, p.text, CHORD_FONT, CHORD_SIZE, rise=CHORD_RISE)
        else:
            surface.draw_text(
                p.x,
                state.y,
                p.text,
                LYRIC_STYLE.font,
                LYRIC_STYLE.size,
                char_space=p.char_space,
                word_space=p.word_space,
            )

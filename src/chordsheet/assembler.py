"""Song assembly: parsed expressions in, drawn page out.

One song is rendered into a :class:`~chordsheet.surface.RecordingSurface`
first.  Only completed recordings are replayed onto the shared PDF, so a
song whose source cannot be read never leaves a half-drawn page behind and
songs can be rendered on worker threads while a single writer owns the
document.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from .chorddb import resolve_chord
from .diagram import draw_chord_row
from .exceptions import SongSourceError
from .layout import (
    COMMENT_STYLE,
    SUBTITLE_STYLE,
    TITLE_STYLE,
    TOP_MARGIN,
    draw_lyric_line,
    draw_text_line,
)
from .models import ChordDefinition, Comment, LyricLine, SongState, SubTitle, Title
from .parser import parse_lines
from .registry import get_source
from .surface import PAGE_HEIGHT, PAGE_WIDTH, PdfDocument, RecordingSurface, Surface

logger = logging.getLogger(__name__)

# "%" repeats the previous chord and "" is an empty placeholder; neither
# has a diagram.
PSEUDO_CHORDS = frozenset({"%", ""})


def diagram_chords(state: SongState) -> list[str]:
    """Return the chords that get a diagram, in left-to-right order."""
    return sorted(state.used_chords - PSEUDO_CHORDS)


def render_song(
    lines: Iterable[str],
    surface: Surface,
    width: float = PAGE_WIDTH,
    height: float = PAGE_HEIGHT,
) -> SongState:
    """Render one chord sheet onto *surface* and return its final state."""
    state = SongState(y=height - TOP_MARGIN)

    for expr in parse_lines(lines):
        match expr:
            case Title(text):
                draw_text_line(surface, state, text, TITLE_STYLE)
            case SubTitle(text):
                draw_text_line(surface, state, text, SUBTITLE_STYLE)
            case Comment(text):
                draw_text_line(surface, state, text, COMMENT_STYLE)
            case ChordDefinition(name, frets):
                state.local_chords[name] = frets
            case LyricLine():
                draw_lyric_line(surface, state, expr)
                state.used_chords.update(expr.chords)

    chords = [(name, resolve_chord(name, state.local_chords)) for name in diagram_chords(state)]
    draw_chord_row(surface, chords, width)
    return state


def render_source(
    ref: str,
    width: float = PAGE_WIDTH,
    height: float = PAGE_HEIGHT,
) -> RecordingSurface:
    """Open the song at *ref* and render it into a fresh recording.

    Raises SongSourceError (or OSError while reading) if the song cannot
    be read.
    """
    recording = RecordingSurface()
    with get_source(ref).open(ref) as lines:
        state = render_song(lines, recording, width, height)
    logger.debug("Rendered %s with %d chord diagram(s)", ref, len(diagram_chords(state)))
    return recording


def _try_render(ref: str) -> RecordingSurface | None:
    try:
        return render_source(ref)
    except (SongSourceError, OSError) as exc:
        logger.warning("Skipping song %s: %s", ref, exc)
        return None


def render_songbook(refs: Sequence[str], document: PdfDocument, jobs: int = 1) -> list[str]:
    """Render every song in *refs* as one page of *document*.

    Songs that cannot be read are logged and skipped; the rest still get
    their pages, in input order.  With ``jobs > 1`` songs are rendered on a
    thread pool while pages are still written by the calling thread only.

    Returns:
        The references that failed.
    """
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            recordings = list(executor.map(_try_render, refs))
    else:
        recordings = map(_try_render, refs)

    failed: list[str] = []
    for ref, recording in zip(refs, recordings):
        if recording is None:
            failed.append(ref)
            continue
        document.new_page(PAGE_WIDTH, PAGE_HEIGHT, recording.replay)
        logger.info("Added %s as page %d", ref, document.pages)
    return failed

"""Built-in chord shapes and chord name resolution.

Each shape is a 7-tuple: the barre (base) fret followed by the six strings
from low E to high e.  String values are rows counted from the top of the
diagram, so barre chords are written relative to their base fret::

    Bm7   x24232   ->  (2, -1, 1, 3, 1, 2, 1)

A song may declare its own shapes with ``{define: ...}``; those take
precedence over this table for that song only.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .models import Frets

logger = logging.getLogger(__name__)

MUTED = -1
OPEN = 0

# Rendered as an empty grid: no nut markers, no dots.
UNKNOWN_CHORD: Frets = (0, None, None, None, None, None, None)

_CHORDS: dict[str, Frets] = {
    # A
    "A": (0, -1, 0, 2, 2, 2, 0),
    "Am": (0, -1, 0, 2, 2, 1, 0),
    "A7": (0, -1, 0, 2, 0, 2, 0),
    "Am7": (0, -1, 0, 2, 0, 1, 0),
    "Amaj7": (0, -1, 0, 2, 1, 2, 0),
    "Asus2": (0, -1, 0, 2, 2, 0, 0),
    "Asus4": (0, -1, 0, 2, 2, 3, 0),
    # B
    "B": (2, -1, 1, 3, 3, 3, 1),
    "Bm": (2, -1, 1, 3, 3, 2, 1),
    "B7": (0, -1, 2, 1, 2, 0, 2),
    "Bm7": (2, -1, 1, 3, 1, 2, 1),
    "Bb": (1, -1, 1, 3, 3, 3, 1),
    # C
    "C": (0, -1, 3, 2, 0, 1, 0),
    "C7": (0, -1, 3, 2, 3, 1, 0),
    "Cmaj7": (0, -1, 3, 2, 0, 0, 0),
    "Cadd9": (0, -1, 3, 2, 0, 3, 0),
    "C/G": (0, 3, 3, 2, 0, 1, 0),
    "C#m": (4, -1, 1, 3, 3, 2, 1),
    # D
    "D": (0, -1, -1, 0, 2, 3, 2),
    "Dm": (0, -1, -1, 0, 2, 3, 1),
    "D7": (0, -1, -1, 0, 2, 1, 2),
    "Dm7": (0, -1, -1, 0, 2, 1, 1),
    "Dmaj7": (0, -1, -1, 0, 2, 2, 2),
    "Dsus2": (0, -1, -1, 0, 2, 3, 0),
    "Dsus4": (0, -1, -1, 0, 2, 3, 3),
    "D/F#": (0, 2, 0, 0, 2, 3, 2),
    # E
    "E": (0, 0, 2, 2, 1, 0, 0),
    "Em": (0, 0, 2, 2, 0, 0, 0),
    "E7": (0, 0, 2, 0, 1, 0, 0),
    "Em7": (0, 0, 2, 0, 0, 0, 0),
    "Esus4": (0, 0, 2, 2, 2, 0, 0),
    # F
    "F": (1, 1, 3, 3, 2, 1, 1),
    "Fm": (1, 1, 3, 3, 1, 1, 1),
    "Fmaj7": (0, -1, -1, 3, 2, 1, 0),
    "F#": (2, 1, 3, 3, 2, 1, 1),
    "F#m": (2, 1, 3, 3, 1, 1, 1),
    # G
    "G": (0, 3, 2, 0, 0, 0, 3),
    "G7": (0, 3, 2, 0, 0, 0, 1),
    "Gmaj7": (0, 3, 2, 0, 0, 0, 2),
    "Gsus4": (0, 3, 3, 0, 0, 1, 3),
    "G/B": (0, -1, 2, 0, 0, 0, 3),
    "Gm": (3, 1, 3, 3, 1, 1, 1),
}

KNOWN_CHORDS: Mapping[str, Frets] = MappingProxyType(_CHORDS)


def resolve_chord(name: str, local: Mapping[str, Frets]) -> Frets:
    """Return the shape for *name*: song-local first, then built-in.

    Unknown names resolve to :data:`UNKNOWN_CHORD` and log a warning.
    """
    if name in local:
        return local[name]
    if name in KNOWN_CHORDS:
        return KNOWN_CHORDS[name]
    logger.warning("Unknown chord %r, drawing an empty diagram", name)
    return UNKNOWN_CHORD

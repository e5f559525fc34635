"""Fretboard chord diagrams.

A diagram is a 6-string x 4-fret grid with the chord name centred above
it.  The top edge is a thick nut line for open-position chords; chords
played higher up the neck (barre fret 2 or more) print the fret number to
the left of the grid instead.

Open strings get a ring above the grid, muted strings an X, fretted
strings a filled dot in the middle of their row.  Strings with no data
(``None``) get nothing, so an unknown chord is just an empty grid.
"""

from collections.abc import Iterable

from .chorddb import MUTED, OPEN
from .models import Frets
from .surface import Surface

STRING_SPACING = 5.0
FRET_SPACING = 7.0
GRID_BOTTOM = 4.4 * FRET_SPACING
MARK_RADIUS = 1.4
DOT_RADIUS = MARK_RADIUS + 0.4

GRID_LINE_WIDTH = 0.3
NUT_LINE_WIDTH = 1.0

NAME_FONT = "Times-Roman"
NAME_SIZE = 12.0
BARRE_FONT = "Helvetica"
BARRE_SIZE = FRET_SPACING

# Diagrams are laid out in a row near the bottom of the page.
DIAGRAM_PITCH = 40.0
DIAGRAM_TOP = 100.0


def draw_chord(surface: Surface, left: float, top: float, name: str, frets: Frets) -> None:
    """Draw one chord diagram whose grid starts at (*left*, *top*)."""
    barre = frets[0]
    if barre is not None and barre >= 2:
        # Make room for the fret number
        left += STRING_SPACING / 2
    right = left + 5 * STRING_SPACING
    bottom = top - GRID_BOTTOM

    name_width = surface.string_width(name, NAME_FONT, NAME_SIZE)
    surface.draw_text((left + right - name_width) / 2, top + FRET_SPACING, name, NAME_FONT, NAME_SIZE)

    if barre is None or barre < 2:
        surface.set_line_width(NUT_LINE_WIDTH)
        surface.line(left - 0.15, top + 0.5, right + 0.15, top + 0.5)
        up = 0.0
    else:
        surface.draw_text(
            left - STRING_SPACING, top - 0.9 * FRET_SPACING, str(barre), BARRE_FONT, BARRE_SIZE
        )
        up = 1.6

    surface.set_line_width(GRID_LINE_WIDTH)
    for fret in range(5):
        y = top - fret * FRET_SPACING
        surface.line(left, y, right, y)
    for string in range(6):
        x = left + string * STRING_SPACING
        surface.line(x, top + up, x, bottom)

    above = top + 2.0 + MARK_RADIUS
    for string, position in enumerate(frets[1:7]):
        x = left + string * STRING_SPACING
        if position is None:
            continue
        if position == MUTED:
            l, r = x - MARK_RADIUS, x + MARK_RADIUS
            t, b = above - MARK_RADIUS, above + MARK_RADIUS
            surface.line(l, t, r, b)
            surface.line(r, t, l, b)
        elif position == OPEN:
            surface.circle(x, above, MARK_RADIUS)
        else:
            surface.circle(x, top - (position - 0.5) * FRET_SPACING, DOT_RADIUS, fill=True)


def draw_chord_row(surface: Surface, chords: Iterable[tuple[str, Frets]], page_width: float) -> None:
    """Draw diagrams left to right so that the row ends at the right margin."""
    chords = list(chords)
    x = page_width - DIAGRAM_PITCH * len(chords)
    for name, frets in chords:
        draw_chord(surface, x, DIAGRAM_TOP, name, frets)
        x += DIAGRAM_PITCH

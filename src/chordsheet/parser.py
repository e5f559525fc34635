"""Line-oriented chord sheet parser.

Turns the lines of a chord sheet into a lazy stream of typed expressions:

  1. ``# ...`` and blank lines        — skipped
  2. ``{title: ...}``, ``{t: ...}``   — :class:`~chordsheet.models.Title`
  3. ``{subtitle: ...}``, ``{st: ...}`` — :class:`~chordsheet.models.SubTitle`
  4. ``{c: ...}``, ``{comment: ...}`` — :class:`~chordsheet.models.Comment`
  5. ``{define: ...}``                — :class:`~chordsheet.models.ChordDefinition`
  6. anything else                    — :class:`~chordsheet.models.LyricLine`

Unknown directives and malformed definitions are not fatal: they are logged
and come out as a :class:`~chordsheet.models.Comment` holding the raw text.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from .exceptions import DefineSyntaxError
from .models import ChordDefinition, ChordExpression, Comment, LyricLine, SubTitle, Title

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

# A directive occupies the whole line: {cmd} or {cmd: argument}
DIRECTIVE_RE = re.compile(r"\s*\{(?P<cmd>\w+)(?::\s*(?P<arg>.*))?\}\s*")

# Inline chord annotation.  Brackets cannot nest; a lone "[" stays lyric text.
CHORD_ANNOTATION_RE = re.compile(r"\[([^\[\]]*)\]")

# {define: Bm7 base-fret 2 frets x 1 3 1 2 1}
_FRET = r"[0-5xX]"
DEFINE_RE = re.compile(
    rf"(?P<name>\S+)\s+base-fret\s+(?P<base>{_FRET})"
    rf"\s+frets(?P<strings>(?:\s+{_FRET}){{6}})\s*",
    re.IGNORECASE,
)

_TITLE_COMMANDS = {"t", "title"}
_SUBTITLE_COMMANDS = {"st", "subtitle"}
_COMMENT_COMMANDS = {"c", "comment"}


# ---------------------------------------------------------------------------
# Single line
# ---------------------------------------------------------------------------


def is_comment_line(line: str) -> bool:
    """Return True for lines the parser drops entirely (blank or ``#``)."""
    stripped = line.lstrip()
    return not stripped or stripped.startswith("#")


def parse_fret(token: str) -> int:
    """``x``/``X`` is a muted string (-1); digits are taken as-is."""
    if token in ("x", "X"):
        return -1
    return int(token)


def parse_define(arg: str) -> ChordDefinition:
    """Parse the argument of a ``{define: ...}`` directive.

    Raises DefineSyntaxError if *arg* does not match
    ``<name> base-fret <0-5|x> frets <0-5|x> x6``.
    """
    m = DEFINE_RE.fullmatch(arg.strip())
    if not m:
        raise DefineSyntaxError(arg, "expected '<name> base-fret N frets N N N N N N'")
    frets = (parse_fret(m.group("base")), *(parse_fret(t) for t in m.group("strings").split()))
    return ChordDefinition(name=m.group("name"), frets=frets)


def split_lyric(line: str) -> tuple[str, ...]:
    """Split a lyric line into alternating text and chord segments.

    The result always starts and ends with a (possibly empty) text segment::

        "La[C]la[G]la" -> ("La", "C", "la", "G", "la")
        "[D]"          -> ("", "D", "")
    """
    segments: list[str] = []
    pos = 0
    for m in CHORD_ANNOTATION_RE.finditer(line):
        segments.append(line[pos:m.start()])
        segments.append(m.group(1))
        pos = m.end()
    segments.append(line[pos:])
    return tuple(segments)


def parse_line(line: str) -> ChordExpression:
    """Classify one non-comment line and return its expression."""
    m = DIRECTIVE_RE.fullmatch(line)
    if not m:
        return LyricLine(segments=split_lyric(line))

    cmd = m.group("cmd")
    arg = (m.group("arg") or "").rstrip()
    raw = line.strip()

    if cmd in _TITLE_COMMANDS:
        return Title(arg)
    if cmd in _SUBTITLE_COMMANDS:
        return SubTitle(arg)
    if cmd in _COMMENT_COMMANDS:
        return Comment(arg)
    if cmd == "define":
        try:
            return parse_define(arg)
        except DefineSyntaxError as exc:
            logger.warning("%s; keeping it as a comment", exc)
            return Comment(raw)

    logger.warning("Unknown directive %r; keeping it as a comment", cmd)
    return Comment(raw)


# ---------------------------------------------------------------------------
# Stream
# ---------------------------------------------------------------------------


def parse_lines(lines: Iterable[str]) -> Iterator[ChordExpression]:
    """Lazily parse *lines*, yielding one expression per meaningful line.

    Lines are pulled from *lines* only as expressions are consumed.
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if is_comment_line(line):
            continue
        yield parse_line(line)

import logging

import pytest

from chordsheet.models import ChordDefinition, Comment, LyricLine, SubTitle, Title
from chordsheet.parser import (
    is_comment_line,
    parse_define,
    parse_line,
    parse_lines,
    split_lyric,
)
from chordsheet.exceptions import DefineSyntaxError


def _rejoin(segments) -> str:
    return "".join(s if i % 2 == 0 else f"[{s}]" for i, s in enumerate(segments))


# ---------------------------------------------------------------------------
# Directives
# ---------------------------------------------------------------------------


def test_title_directive():
    assert parse_line("{title: Test Song}") == Title("Test Song")


def test_title_short_form():
    assert parse_line("{t:Down on the Corner}") == Title("Down on the Corner")


def test_subtitle_directives():
    assert parse_line("{subtitle: CCR}") == SubTitle("CCR")
    assert parse_line("{st: CCR}") == SubTitle("CCR")


def test_comment_directives():
    assert parse_line("{c: Chorus}") == Comment("Chorus")
    assert parse_line("{comment: Chorus}") == Comment("Chorus")


def test_directive_surrounding_whitespace_ignored():
    assert parse_line("  {title: Test Song }  ") == Title("Test Song")


def test_directive_without_argument():
    assert parse_line("{title}") == Title("")


def test_unknown_directive_becomes_comment(caplog):
    with caplog.at_level(logging.WARNING):
        expr = parse_line("{start_of_chorus}")
    assert expr == Comment("{start_of_chorus}")
    assert "start_of_chorus" in caplog.text


def test_braces_inside_lyrics_are_not_directives():
    expr = parse_line("Say {yeah} [G]now")
    assert isinstance(expr, LyricLine)
    assert expr.segments == ("Say {yeah} ", "G", "now")


# ---------------------------------------------------------------------------
# {define}
# ---------------------------------------------------------------------------


def test_define_barre_chord():
    expr = parse_line("{define: X base-fret 2 frets 2 2 1 0 0 0}")
    assert expr == ChordDefinition("X", (2, 2, 2, 1, 0, 0, 0))


def test_define_muted_strings():
    expr = parse_define("Bm7 base-fret 2 frets x 1 3 1 2 X")
    assert expr.frets == (2, -1, 1, 3, 1, 2, -1)


def test_define_muted_base_fret():
    assert parse_define("D base-fret x frets x x 0 2 3 2").frets[0] == -1


def test_define_keywords_case_insensitive():
    expr = parse_define("Am BASE-FRET 0 FRETS x 0 2 2 1 0")
    assert expr == ChordDefinition("Am", (0, -1, 0, 2, 2, 1, 0))


@pytest.mark.parametrize("arg", [
    "Am base-fret 0 frets x 0 2 2 1",      # five strings
    "Am base-fret 0 frets x 0 2 2 1 0 0",  # seven strings
    "Am base-fret 7 frets x 0 2 2 1 0",    # fret out of range
    "Am frets x 0 2 2 1 0",                # no base-fret
    "base-fret 0 frets x 0 2 2 1 0",       # no name
])
def test_define_bad_grammar_raises(arg):
    with pytest.raises(DefineSyntaxError):
        parse_define(arg)


def test_malformed_define_becomes_comment(caplog):
    with caplog.at_level(logging.WARNING):
        expr = parse_line("{define: Am frets 1 2 3}")
    assert expr == Comment("{define: Am frets 1 2 3}")
    assert "Am frets 1 2 3" in caplog.text


def test_define_values_in_range():
    expr = parse_define("E7 base-fret 0 frets 0 2 0 1 0 0")
    assert len(expr.frets) == 7
    assert all(v == -1 or 0 <= v <= 5 for v in expr.frets)


# ---------------------------------------------------------------------------
# Lyric lines
# ---------------------------------------------------------------------------


def test_lyric_segments():
    expr = parse_line("La[C]la[G]la")
    assert expr == LyricLine(("La", "C", "la", "G", "la"))
    assert expr.chords == ("C", "G")
    assert expr.texts == ("La", "la", "la")


def test_lyric_without_chords():
    assert split_lyric("just words") == ("just words",)


def test_lyric_leading_and_trailing_chords():
    assert split_lyric("[D]") == ("", "D", "")
    assert split_lyric("[C]Early in the [G]") == ("", "C", "Early in the ", "G", "")


def test_adjacent_chords_have_empty_text_between():
    assert split_lyric("[C][G]la") == ("", "C", "", "G", "la")


def test_empty_chord_name_kept():
    assert split_lyric("la[]la") == ("la", "", "la")


def test_unterminated_bracket_is_text():
    assert split_lyric("oh [yeah") == ("oh [yeah",)


@pytest.mark.parametrize("line", [
    "La[C]la[G]la",
    "[Am]Early in the [G]evening just a[C]bout supper [Am7]time",
    "no chords at all",
    "[D]",
    "oh [a [b] c]",
    "[%] [%] [G/B]",
])
def test_segments_alternate_and_reconstruct(line):
    segments = split_lyric(line)
    assert len(segments[1::2]) == len(segments[0::2]) - 1
    assert _rejoin(segments) == line


# ---------------------------------------------------------------------------
# Comment lines and streaming
# ---------------------------------------------------------------------------


def test_is_comment_line():
    assert is_comment_line("# a comment")
    assert is_comment_line("   # indented comment")
    assert is_comment_line("")
    assert is_comment_line("   ")
    assert not is_comment_line("La [C]la # not a comment")


def test_parse_lines_skips_comments_and_strips_newlines():
    lines = ["# header\n", "{title: Test Song}\n", "\n", "La[C]la\r\n"]
    assert list(parse_lines(lines)) == [Title("Test Song"), LyricLine(("La", "C", "la"))]


def test_parse_lines_is_lazy():
    pulled = []

    def source():
        for line in ["{title: One}", "# skip", "La[C]la", "{c: never}"]:
            pulled.append(line)
            yield line

    stream = parse_lines(source())
    assert pulled == []
    assert next(stream) == Title("One")
    assert pulled == ["{title: One}"]
    assert next(stream) == LyricLine(("La", "C", "la"))
    assert pulled == ["{title: One}", "# skip", "La[C]la"]

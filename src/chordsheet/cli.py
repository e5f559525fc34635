import logging
import sys

import click

from .assembler import render_songbook
from .surface import PdfDocument


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.argument("songs", nargs=-1, required=True, metavar="SONG...")
@click.option("-o", "--output", "output_path", default="songbook.pdf", show_default=True,
              metavar="PATH", help="PDF file to write.")
@click.option("--title", default="Songbook", show_default=True,
              help="Document title stored in the PDF metadata.")
@click.option("-j", "--jobs", default=1, show_default=True, type=click.IntRange(min=1),
              help="Render up to N songs in parallel.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details.")
def main(songs: tuple[str, ...], output_path: str, title: str, jobs: int, verbose: bool) -> None:
    """Typeset ChordPro chord sheets into a PDF songbook.

    Each SONG (a file path or an http(s) URL) becomes one page with its
    lyrics, chords above the lyrics, and a diagram for every chord used.
    """
    _setup_logging(verbose)

    document = PdfDocument(output_path, title=title)
    failed = render_songbook(songs, document, jobs=jobs)
    document.save()

    click.echo(f"Written {document.pages} page(s) to {output_path}")
    if failed:
        click.echo(f"Error: {len(failed)} song(s) could not be read: {', '.join(failed)}", err=True)
        sys.exit(1)

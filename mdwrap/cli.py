"""CLI entry point for mdwrap."""

from __future__ import annotations

import click

from ._logging import enable_cli_logging, resolve_logger
from .errors import MdwrapError
from .io import iter_markdown_files, read_markdown, rewrite
from .process import WRAP_COLS, Options, process_text


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--width",
    type=click.IntRange(min=1),
    default=WRAP_COLS,
    show_default=True,
    help="Target line width in display columns.",
)
@click.option("--wrap/--no-wrap", default=True, show_default=True, help="Re-wrap paragraphs.")
@click.option("--ellipsis", is_flag=True, help="Replace '...' with '…' outside code.")
@click.option("--in-place", "in_place", is_flag=True, help="Rewrite files instead of printing them.")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
def main(paths: tuple[str, ...], width: int, wrap: bool, ellipsis: bool, in_place: bool, verbose: bool) -> None:
    """Wrap Markdown prose without breaking code spans, links or structure.

    With no PATHS the document is read from stdin and written to stdout.
    Directories are searched for *.md and *.markdown files.
    """
    if verbose:
        enable_cli_logging()
    lg = resolve_logger(enabled=verbose, name=__name__)
    if in_place and not paths:
        raise click.UsageError("--in-place requires at least one path")

    options = Options(wrap=wrap, width=width, ellipsis=ellipsis)

    if not paths:
        source = click.get_text_stream("stdin").read()
        click.echo(process_text(source, options, log=verbose), nl=False)
        return

    failed = 0
    for path in iter_markdown_files(paths):
        try:
            if in_place:
                rewrite(path, options)
            else:
                click.echo(process_text(read_markdown(path), options, log=verbose), nl=False)
        except MdwrapError as exc:
            click.echo(f"mdwrap: {exc}", err=True)
            failed += 1
    if failed:
        lg.debug("%d file(s) failed", failed)
        raise SystemExit(1)


if __name__ == "__main__":
    main()

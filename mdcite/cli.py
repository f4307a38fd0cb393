"""mdcite CLI - Click command definition and main entry point."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from mdcite.citations import number_citations, render_footnotes
from mdcite.output import read_markdown, save_keys, save_markdown
from mdcite.trace import CitationTracer
from mdcite.utils import resolve_output

console = Console(stderr=True, emoji=False)


def _status(label: str, detail: object = None) -> None:
    line = f"[green]{escape(f'[{label}]')}[/green]"
    if detail is not None:
        line += f" {escape(str(detail))}"
    console.print(line, highlight=False, soft_wrap=True)


@click.command()
@click.argument("markdown", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", "output_path", type=click.Path(), default=None,
              help="Markdown file to write. Omit to overwrite MARKDOWN.")
@click.option("--dryrun", is_flag=True,
              help="Trace every replacement; no files are modified.")
@click.option("--term", is_flag=True, help="Print the result to the terminal instead of a file.")
@click.option("--nohtml", is_flag=True, help="Plain [1] numbers instead of html footnote links.")
@click.option("--footnotes", is_flag=True,
              help="Append the numbered footnote list after the document.")
@click.option("--keys", "keys_path", type=click.Path(dir_okay=False), default=None,
              help="Write the cited keys and their numbers as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Verbose progress output")
def main(
    markdown: Path,
    output_path: str | None,
    dryrun: bool,
    term: bool,
    nohtml: bool,
    footnotes: bool,
    keys_path: str | None,
    verbose: bool,
):
    """Number the citations in a markdown file.

    Citations are written as @Key or [@KeyOne, @KeyTwo] and become
    footnote references [1] or [1, 2], numbered by first appearance.

    \b
    Examples:
        mdcite paper.md                       # rewrite in place
        mdcite paper.md -o out/               # write out/paper.md
        mdcite paper.md --nohtml --term       # plain numbers to stdout
        mdcite paper.md --dryrun              # show each replacement
        mdcite paper.md --footnotes --keys keys.json
    """
    out = resolve_output(markdown, output_path)

    if verbose:
        target = "terminal" if term or dryrun else str(out)
        style = "plain" if nohtml else "html"
        console.print(Panel(
            f"[bold]mdcite - Markdown citations[/bold]\n{escape(str(markdown))} -> "
            f"{escape(target)}\nStyle: {style}",
            expand=False,
        ))

    if dryrun:
        _status("Reading from file", markdown)
        _status("Writing to file", out)

    try:
        contents = read_markdown(markdown)
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Error reading the contents of {markdown}: {e}")

    tracer = CitationTracer(console) if dryrun else None
    result = number_citations(contents, html=not nohtml, tracer=tracer)

    edited = result.markdown
    footnote_list = ""
    if footnotes:
        footnote_list = render_footnotes(result.registry, html=not nohtml)
        edited = f"{edited}\n{footnote_list}"

    if verbose:
        console.print(f"[dim]Numbered {len(result.registry)} unique citation keys[/dim]")

    if dryrun:
        _status("Edited Markdown")
        console.print(result.markdown, markup=False, highlight=False, soft_wrap=True)
        if footnotes:
            _status("Footnotes")
            console.print(footnote_list, markup=False, highlight=False, soft_wrap=True)
        return

    try:
        if term:
            click.echo(edited)
        else:
            save_markdown(edited, out)
            console.print(f"[green]Saved:[/green] {escape(str(out))}")

        if keys_path:
            save_keys(result.registry, Path(keys_path))
            console.print(f"[green]Saved:[/green] {escape(keys_path)}")
    except OSError as e:
        raise click.ClickException(f"Error writing output: {e}")


if __name__ == "__main__":
    main()

"""CLI entry point for resbridge."""

import logging
from pathlib import Path

import click

from . import __version__
from .config import FormatterConfig
from .core import ConversionService
from .errors import ResbridgeError
from .formatters import AndroidFormatter, determine_language_given_path
from .store import StringsStore


def configure_logging(verbose: bool) -> None:
    """Configure console logging for the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _split(value: str) -> list[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


@click.group()
@click.version_option(version=__version__)
def cli():
    """Convert Android strings.xml files to and from canonical translations."""
    pass


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
def parse(file: Path):
    """Parse and display the canonical entries of a strings.xml file.

    FILE is the path to the strings.xml file to parse.
    """
    formatter = AndroidFormatter(StringsStore())
    try:
        entries = formatter.parse_file(file)
    except ResbridgeError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    if not entries:
        click.secho("No entries found.", fg='yellow')
        return

    click.echo(f"Entries ({len(entries)} total):\n")
    for entry in entries:
        click.echo(f'{entry.key} = "{entry.text}"')


@cli.command()
@click.argument('path')
@click.option('--base', default='en', help='Language of the unsuffixed values directory')
def language(path: str, base: str):
    """Show the language code of a resource path.

    PATH is a path such as res/values-zh-rCN/strings.xml.
    """
    lang = determine_language_given_path(path, base)
    if lang is None:
        click.secho(f"Unable to determine language for {path}", fg='red', err=True)
        raise SystemExit(1)
    click.echo(lang)


@cli.command()
@click.argument('sources', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--output', '-o', required=True, type=click.Path(dir_okay=False, path_type=Path), help='File to write')
@click.option('--lang', default=None, help='Language to write. Determined from OUTPUT if omitted')
@click.option('--languages', '-l', default='en', help='Comma-separated language codes, base language first')
@click.option('--tags', default='', help='Comma-separated tags to write')
@click.option('--untagged', is_flag=True, help='Also write rows without tags')
@click.option('--include-untranslated', is_flag=True, help='Use base language text for missing translations')
@click.option('--strict', is_flag=True, help='Fail on files whose language cannot be determined')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def convert(
    sources: tuple[Path, ...],
    output: Path,
    lang: str,
    languages: str,
    tags: str,
    untagged: bool,
    include_untranslated: bool,
    strict: bool,
    verbose: bool
):
    """Read strings.xml files and write one language to OUTPUT.

    SOURCES are strings.xml files inside values directories, e.g.
    res/values/strings.xml and res/values-de/strings.xml.
    """
    configure_logging(verbose)

    tag_list = _split(tags)
    config = FormatterConfig(
        languages=_split(languages),
        tags=tag_list,
        include_untagged=untagged,
        include_untranslated=include_untranslated,
        consume_all=True,
        strict=strict
    )
    service = ConversionService(config=config)

    try:
        report = service.import_files(sources)
        written = service.export_file(output, lang)
    except ResbridgeError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(1)

    for path in report.files_skipped:
        click.secho(f"  skipped {path}", fg='yellow')
    click.echo(
        f"Read {report.strings_read} strings from {len(report.files_read)} files "
        f"({', '.join(report.languages)})"
    )

    if written is None:
        click.secho(f"Unable to determine language for {output}", fg='red', err=True)
        raise SystemExit(1)
    click.secho(f"Wrote {written}", fg='green')


if __name__ == '__main__':
    cli()

"""Command-line interface for pathkit."""
import sys
import logging
from typing import Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from .core.errors import FormatMismatchError, InvalidJoinError, ResolutionError
from .core.models import Config, PathFormat
from .core.path import Path
from .core.resolver import Resolver

THEME = Theme({
    'info': 'cyan',
    'success': 'green',
    'error': 'bold red',
    'path': 'bright_green',
    'dim': 'bright_black',
})

FORMAT_CHOICES = ['native', 'posix', 'windows']


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _flag(value: bool) -> str:
    return "[success]yes[/success]" if value else "[dim]no[/dim]"


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(package_name='pathkit')
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """
    Parse, join and resolve filesystem paths in POSIX or Windows format.

    Examples:

        pathkit inspect 'c:/foo/bar.txt' --format windows

        pathkit join /usr/local lib python3

        pathkit resolve config.toml --search ~/.config/app
    """
    config = Config()
    setup_logging(debug or config.debug)
    try:
        config.resolved_format()
    except ValueError as e:
        raise click.UsageError(f"Invalid PATHKIT_PATH_FORMAT: {e}") from e
    ctx.obj = {
        'config': config,
        'console': Console(theme=THEME, highlight=False, soft_wrap=True),
    }


@main.command()
@click.argument('path')
@click.option('--format', '-f', 'format_name', type=click.Choice(FORMAT_CHOICES), default='native',
              help='Path format to parse with')
@click.pass_context
def inspect(ctx: click.Context, path: str, format_name: str) -> None:
    """Show how PATH is parsed."""
    console: Console = ctx.obj['console']
    parsed = Path.parse(path, PathFormat.from_name(format_name))

    table = Table(title=f"{escape(repr(path))} ({parsed.path_format.name.lower()})", show_header=False)
    table.add_column("field", style="info")
    table.add_column("value")
    table.add_row("rendered", f"[path]{escape(str(parsed))}[/path]")
    table.add_row("components", escape(", ".join(repr(c) for c in parsed.components)) or "[dim]none[/dim]")
    table.add_row("absolute", _flag(parsed.is_absolute()))
    table.add_row("leading separator", _flag(parsed.starts_with_separator))
    table.add_row("trailing separator", _flag(parsed.ends_with_separator))
    table.add_row("volume", escape(parsed.volume) or "[dim]none[/dim]")
    table.add_row("filename", escape(repr(parsed.filename())))
    table.add_row("extension", escape(repr(parsed.extension())))
    table.add_row("parent", escape(repr(str(parsed.parent_path()))))
    console.print(table)


@main.command()
@click.argument('base')
@click.argument('parts', nargs=-1, required=True)
@click.option('--format', '-f', 'format_name', type=click.Choice(FORMAT_CHOICES), default='native',
              help='Path format of every argument')
@click.pass_context
def join(ctx: click.Context, base: str, parts: Tuple[str, ...], format_name: str) -> None:
    """Join BASE with one or more relative PARTS."""
    console: Console = ctx.obj['console']
    path_format = PathFormat.from_name(format_name)
    result = Path.parse(base, path_format)
    try:
        for part in parts:
            result = result / Path.parse(part, path_format)
    except (FormatMismatchError, InvalidJoinError) as e:
        console.print(f"[error]Cannot join:[/error] {escape(str(e))}")
        ctx.exit(2)
    console.print(f"[path]{escape(str(result))}[/path]")


@main.command()
@click.argument('path')
@click.pass_context
def absolute(ctx: click.Context, path: str) -> None:
    """Resolve PATH to an absolute path."""
    console: Console = ctx.obj['console']
    try:
        result = Path.parse(path).make_absolute()
    except ResolutionError as e:
        console.print(f"[error]Cannot resolve {escape(path)}:[/error] {escape(str(e))}")
        ctx.exit(1)
    console.print(f"[path]{escape(str(result))}[/path]")


@main.command()
@click.argument('name')
@click.option('--search', '-s', multiple=True, help='Search root tried after the configured ones')
@click.option('--prepend', '-p', multiple=True, help='Search root tried before all others')
@click.option('--verbose', '-v', is_flag=True, help='Show the search roots')
@click.pass_context
def resolve(ctx: click.Context, name: str, search: Tuple[str, ...],
            prepend: Tuple[str, ...], verbose: bool) -> None:
    """
    Look NAME up in the search roots.

    The working directory is searched first, then PATHKIT_SEARCH_PATH, then
    every --search root. Each --prepend root goes in front, so the last one
    given wins. Prints NAME unchanged when no root contains it.
    """
    console: Console = ctx.obj['console']
    config: Config = ctx.obj['config']
    try:
        resolver = Resolver.from_config(config)
    except (ResolutionError, ValueError) as e:
        console.print(f"[error]Cannot build search path:[/error] {escape(str(e))}")
        ctx.exit(1)

    for root in search:
        resolver.append(root)
    for root in prepend:
        resolver.prepend(root)

    if verbose:
        for index, root in enumerate(resolver):
            console.print(f"[dim]{index:>3}[/dim] [info]{escape(str(root))}[/info]")

    console.print(f"[path]{escape(str(resolver.resolve(name)))}[/path]")


if __name__ == '__main__':
    main()

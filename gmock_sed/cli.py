"""
gmock-sed: Simple CLI tool for updating gMock macros. (MOCK_METHODn -> MOCK_METHOD)
"""
import logging
import sys
from pathlib import Path

import click

from .config import load_settings
from .files import LOG_FORMAT, find_cpp_files, rewrite_many, search_many, write_source
from .rewrite import ReplaceMode, ReplaceSummary, RewriteOptions
from .search import SearchMode


def _settings(config_path):
    try:
        return load_settings(config_path)
    except ValueError as e:
        raise click.UsageError(str(e))


def _styled_ratio(summary: ReplaceSummary) -> str:
    if summary.suggestion is None:
        color = 'yellow'
    elif summary.errors:
        color = 'red'
    else:
        color = 'green'
    return click.style(summary.ratio(), fg=color)


@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Log every macro that could not be rewritten.')
def cli(verbose):
    """Simple CLI tool for updating gMock macros. (MOCK_METHODn -> MOCK_METHOD)"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


@cli.command()
@click.option('-c', '--count', is_flag=True, help='List each result with a count of macros detected.')
@click.option('--max-depth', type=int, default=None,
              help='Maximum depth for directory traversal (default 50).')
@click.option('-j', '--jobs', type=click.IntRange(min=1), default=None,
              help='Number of files processed in parallel.')
@click.option('--config', 'config_path', type=click.Path(path_type=Path), default=None,
              help='TOML settings file (default: .gmock-sed.toml).')
@click.argument('directory', type=click.Path(exists=True, path_type=Path))
def search(count, max_depth, jobs, config_path, directory):
    """Locate files under DIRECTORY with at least one old-style MOCK_METHODn macro."""
    settings = _settings(config_path)
    depth = settings.max_depth if max_depth is None else max_depth
    mode = SearchMode.from_flag(count)
    files = find_cpp_files(directory, settings.extensions, depth)
    for path, result in zip(files, search_many(files, mode, jobs or settings.jobs)):
        if result.is_match:
            click.echo(f"{path}{result}")


@cli.command()
@click.option('--dry-run', is_flag=True, help="Don't overwrite files.")
@click.option('--multi-line', is_flag=True, help='Enable multi-line mode.')
@click.option('--add-override', is_flag=True, help='Add the override qualifier to every macro.')
@click.option('--strict-arity', is_flag=True,
              help='Fail macros whose argument count differs from MOCK_METHODn.')
@click.option('-j', '--jobs', type=click.IntRange(min=1), default=None,
              help='Number of files processed in parallel.')
@click.option('--config', 'config_path', type=click.Path(path_type=Path), default=None,
              help='TOML settings file (default: .gmock-sed.toml).')
@click.argument('paths', nargs=-1, type=click.Path(path_type=Path))
def replace(dry_run, multi_line, add_override, strict_arity, jobs, config_path, paths):
    """Substitute old-style macros in PATHS with equivalent MOCK_METHOD macros."""
    settings = _settings(config_path)
    mode = ReplaceMode.from_flag(multi_line or settings.multi_line)
    options = RewriteOptions(
        add_override=add_override or settings.add_override,
        strict_arity=strict_arity or settings.strict_arity,
    )
    results = rewrite_many(paths, mode, options, jobs or settings.jobs)

    failed = False
    for path, result in zip(paths, results):
        # empty or unreadable
        if result is None:
            continue
        click.echo(f"{path}: {_styled_ratio(result)}")
        if result.errors:
            failed = True
            for line in result.errors:
                click.echo(f"  {line}", err=True)
        if not dry_run and result.error_free():
            write_source(path, result)
    if failed:
        sys.exit(1)


if __name__ == '__main__':
    cli()

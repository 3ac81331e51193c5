"""CLI interface for untranslated.

Provides the ``check`` command for linting files and directories.
"""

import sys
from pathlib import Path

import click

from untranslated import __version__
from untranslated.config import ConfigError, resolve_options
from untranslated.logging import logger, set_verbosity


@click.group()
@click.version_option(version=__version__, prog_name="untranslated")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """untranslated - find hard-coded user-facing strings in JS/TS code."""
    set_verbosity(verbose)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Options file (default: nearest .untranslatedrc.json)",
)
@click.option("--ignore", multiple=True, help="Regex; matching text is never reported (repeatable)")
@click.option(
    "--ignore-function",
    multiple=True,
    help="Callee whose arguments are never reported, e.g. t or logger.info (repeatable)",
)
@click.option(
    "--ignore-attribute",
    multiple=True,
    help="JSX attribute whose values are never reported (repeatable)",
)
@click.option(
    "--type-aware/--no-type-aware",
    default=None,
    help="Consult declared literal types in TypeScript files (default: on)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
def check(
    paths: tuple[Path, ...],
    config_path: Path | None,
    ignore: tuple[str, ...],
    ignore_function: tuple[str, ...],
    ignore_attribute: tuple[str, ...],
    type_aware: bool | None,
    output_format: str,
) -> None:
    """Report string literals that should be translated.

    PATHS: Files or directories to lint.

    Exits with status 1 when literals were reported, 2 on configuration
    errors.
    """
    from untranslated.analyzers import lint_paths

    try:
        options = resolve_options(config_path, search_from=paths[0])
        options = options.merged(
            ignore=ignore,
            ignore_function=ignore_function,
            ignore_attribute=ignore_attribute,
            type_aware=type_aware,
        )
    except (ConfigError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    report = lint_paths(paths, options)

    if output_format == "json":
        click.echo(report.model_dump_json(indent=2))
    else:
        for diagnostic in report.diagnostics:
            click.echo(diagnostic.format())
        for error in report.errors:
            logger.warning("%s: %s", error.get("file"), error.get("error"))
        click.echo(
            f"{len(report.diagnostics)} literal(s) in {report.file_count} file(s)",
            err=True,
        )

    if report.diagnostics:
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

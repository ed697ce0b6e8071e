"""Click CLI for strixt."""

from dataclasses import asdict, replace
from typing import Optional

import click
from trogon import tui

from strixt import __version__
from strixt.config import (
    OUTPUT_FORMAT_OPTIONS,
    QUIET,
    VERBOSE,
    StrixtConfig,
)
from strixt.report import make_reporter
from strixt.walker import check_paths


EXIT_CLEAN = 0
EXIT_PEEVES = 1
EXIT_ERROR = 2


@tui()
@click.group()
@click.version_option(version=__version__, prog_name="strixt")
def cli() -> None:
    """strixt - Whitespace and formatting style checker.

    Scans plain-text files byte by byte and reports tabs, trailing
    whitespace, blank-line clusters, overlong lines, missing final
    newlines and control characters.

    Quick start:
        strixt check              Check the current directory
        strixt check -t src       Check src/, allowing indentation tabs
        strixt config show        Show saved settings
    """
    pass


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--tabs", "-t", is_flag=True, help="Allow tabs for indentation")
@click.option("--verbose", "-v", is_flag=True, help="Also report skipped entries and clean files")
@click.option("--quiet", "-q", is_flag=True, help="Only report peeves")
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice([name for name, _ in OUTPUT_FORMAT_OPTIONS]),
    default=None,
    help="Output format (default: from config, else text)",
)
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Files to scan in parallel")
@click.option("--max-peeves", type=click.IntRange(min=0), default=None, help="Peeves shown per file")
@click.option("--max-size", type=click.IntRange(min=1), default=None, help="Bytes read per file")
def check(
    paths: tuple[str, ...],
    tabs: bool,
    verbose: bool,
    quiet: bool,
    fmt: Optional[str],
    jobs: Optional[int],
    max_peeves: Optional[int],
    max_size: Optional[int],
) -> None:
    """Check files and directories for style peeves.

    PATHS: Files or directories to check (default: current directory)

    Exits with status 1 if any peeve was reported.
    """
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive")

    settings = StrixtConfig.load()
    options = settings.scan_options()
    overrides: dict = {}
    if tabs:
        overrides["tabs_allowed"] = True
    if verbose:
        overrides["verbosity"] = VERBOSE
    elif quiet:
        overrides["verbosity"] = QUIET
    if max_peeves is not None:
        overrides["max_shown_peeves_per_file"] = max_peeves
    if max_size is not None:
        overrides["max_text_file_size"] = max_size
    options = replace(options, **overrides)

    reporter = make_reporter(options, fmt or settings.output_format)

    try:
        for report in check_paths(paths or ["."], options, jobs=jobs or settings.jobs):
            reporter.add(report)
    except OSError as e:
        target = e.filename or (paths[0] if paths else ".")
        click.echo(f"Error: {target}: {e.strerror or e}", err=True)
        raise SystemExit(EXIT_ERROR)

    summary = reporter.finish()
    raise SystemExit(EXIT_CLEAN if summary.is_clean else EXIT_PEEVES)


# =============================================================================
# Config Commands - Persistent settings
# =============================================================================


@cli.group()
def config() -> None:
    """Manage saved settings.

    Settings live in ~/.strixt/config.json; command-line flags override them.
    """
    pass


@config.command("show")
def config_show() -> None:
    """Show the current settings."""
    current = StrixtConfig.load()

    click.echo("\n⚙️  strixt Settings")
    click.echo("=" * 40)
    for key, value in asdict(current).items():
        click.echo(f"  {key + ':':<28}{value}")
    click.echo()


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Change one setting.

    KEY: Setting name (see `strixt config show`)
    VALUE: New value
    """
    current = StrixtConfig.load()
    try:
        current.set_value(key, value)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    current.save()
    click.echo(click.style(f"✓ {key} = {getattr(current, key)}", fg="green"))


@config.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def config_reset(yes: bool) -> None:
    """Restore every setting to its default."""
    if not yes:
        click.confirm("Reset all settings to defaults?", abort=True)
    current = StrixtConfig.load()
    current.reset()
    current.save()
    click.echo(click.style("✓ Settings reset", fg="green"))


@config.command("path")
def config_path() -> None:
    """Print the location of the config file."""
    click.echo(str(StrixtConfig.get_config_path()))


if __name__ == "__main__":
    cli()

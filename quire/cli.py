"""Command-line interface for Quire."""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__
from .bootstrap import InitError, init_project
from .config import ConfigError, InitOptions, load_config
from .logging import get_logger, setup_logging

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v for INFO, -vv for DEBUG)")
@click.option("-q", "--quiet", is_flag=True, help="Suppress all output except errors")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this file instead of ~/.quirerc.yml.",
)
@click.version_option(__version__, prog_name="quire")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool, config_path: Path | None) -> None:
    """Quire builds static sites from Markdown sources."""
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    ctx.obj["config"] = config
    setup_logging(level=config.log_level, verbose=verbose, quiet=quiet)


@cli.command()
@click.argument("destination", required=False, type=click.Path(path_type=Path))
@click.option("--clone/--no-clone", default=True, show_default=True, help="Clone the starter repository.")
@click.option("--install/--no-install", default=True, show_default=True, help="Install npm dependencies.")
@click.pass_context
def init(ctx: click.Context, destination: Path | None, clone: bool, install: bool) -> None:
    """Create a new site in DESTINATION (defaults to the current directory)."""
    options = InitOptions(clone=clone, install=install)
    try:
        init_project(
            destination,
            base_dir=Path.cwd(),
            options=options,
            config=ctx.obj["config"],
        )
    except InitError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        logger.critical("Failed to clean up the new site: %s", exc)
        raise click.ClickException(str(exc)) from exc


def main() -> None:  # pragma: no cover - thin wrapper for `python -m quire`
    cli(obj={})


if __name__ == "__main__":  # pragma: no cover
    main()

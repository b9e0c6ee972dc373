from __future__ import annotations

"""Command line access to the resolved Java home."""

import logging
from pathlib import Path

import click
from tabulate import tabulate

from jhome import __version__, osinfo, properties
from jhome.config import LOG_LEVELS, load_config
from jhome.errors import JhomeError
from jhome.home import Jhome


def _jhome(ctx: click.Context) -> Jhome:
    home: Path | None = ctx.obj.get("home")
    try:
        return Jhome.at(home) if home is not None else Jhome()
    except JhomeError as exc:
        raise click.ClickException(str(exc))


@click.group()
@click.version_option(__version__)
@click.option(
    "--home",
    type=click.Path(file_okay=False, path_type=Path),
    help="Use this directory as the Java home instead of resolving it.",
)
@click.option(
    "-D",
    "definitions",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a runtime property, e.g. -D java.home=/opt/jdk21.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (defaults to the configured one).",
)
@click.pass_context
def cli(ctx: click.Context, home: Path | None, definitions: tuple[str, ...], log_level: str | None) -> None:
    """Locate JAVA_HOME and the java/javac binaries inside it."""
    try:
        cfg = load_config()
    except JhomeError as exc:
        raise click.ClickException(str(exc))
    logging.basicConfig(level=(log_level or cfg.log_level).upper())
    try:
        properties.define(definitions)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="-D")
    properties.load_defaults(cfg)
    ctx.ensure_object(dict)
    ctx.obj["home"] = home


@cli.command()
@click.pass_context
def home(ctx: click.Context) -> None:
    """Print the Java home directory."""
    click.echo(str(_jhome(ctx).path()))


@cli.command()
@click.argument("locs", nargs=-1)
@click.pass_context
def path(ctx: click.Context, locs: tuple[str, ...]) -> None:
    """Print LOCS resolved against the Java home."""
    click.echo(str(_jhome(ctx).path(*locs)))


@cli.command()
@click.pass_context
def java(ctx: click.Context) -> None:
    """Print the path of the java binary."""
    click.echo(str(_jhome(ctx).java()))


@cli.command()
@click.pass_context
def javac(ctx: click.Context) -> None:
    """Print the path of the javac binary, failing when it is missing."""
    try:
        click.echo(str(_jhome(ctx).javac()))
    except JhomeError as exc:
        raise click.ClickException(str(exc))


@cli.command()
@click.pass_context
def describe(ctx: click.Context) -> None:
    """Show the resolved home and its binaries."""
    jh = _jhome(ctx)
    rows = [
        ("home", jh.path()),
        ("java", jh.java()),
        ("javac", jh.javac_path()),
        ("javac exists", "yes" if jh.javac_exists() else "no"),
        ("os", osinfo.os_name()),
    ]
    click.echo(tabulate(rows, headers=["Item", "Value"]))


if __name__ == "__main__":  # pragma: no cover
    cli()

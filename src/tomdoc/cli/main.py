from typing import List, Optional

import typer

from tomdoc import __version__
from tomdoc.common import bus
from tomdoc.needle import L, needle as nexus
from tomdoc.spec import ConfigError, OutputFormat
from .factories import (
    configure_logging,
    get_project_root,
    make_app,
    make_config,
    stdin_is_tty,
)
from .rendering import CliRenderer

app = typer.Typer(
    name="tomdoc",
    help=nexus.get(L.cli.app.description),
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(nexus.get(L.cli.version).format(version=__version__))
        raise typer.Exit()


@app.command()
def main(
    files: Optional[List[str]] = typer.Argument(
        None, help=nexus.get(L.cli.argument.files.help), show_default=False
    ),
    text: bool = typer.Option(
        False, "--text", "-t", help=nexus.get(L.cli.option.text.help)
    ),
    markdown: bool = typer.Option(
        False,
        "--markdown",
        "--mark",
        "-m",
        help=nexus.get(L.cli.option.markdown.help),
    ),
    access: Optional[str] = typer.Option(
        None, "--access", "-a", help=nexus.get(L.cli.option.access.help)
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help=nexus.get(L.cli.option.verbose.help)
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help=nexus.get(L.cli.option.version.help),
    ),
):
    # The CLI is the composition root. It decides *which* renderer to use.
    bus.set_renderer(CliRenderer(verbose=verbose))
    nexus.set_project_root(get_project_root())
    configure_logging(verbose)

    if text and markdown:
        bus.error(L.cli.error.conflicting_formats)
        raise typer.Exit(code=1)

    sources = files or []
    if not sources and stdin_is_tty():
        typer.echo(nexus.get(L.cli.usage))
        raise typer.Exit(code=1)

    fmt = None
    if markdown:
        fmt = OutputFormat.MARKDOWN
    elif text:
        fmt = OutputFormat.TEXT

    try:
        config = make_config(fmt=fmt, access=access)
    except ConfigError as e:
        bus.error(L.cli.error.config, error=e)
        raise typer.Exit(code=1)

    app_instance = make_app(config)
    success = app_instance.run(
        sources, write=lambda chunk: typer.echo(chunk, nl=False)
    )
    if not success:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

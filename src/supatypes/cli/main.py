"""supatypes CLI."""

import click

from supatypes import __version__
from supatypes.cli.generate import generate_command
from supatypes.core.logging import configure_logging
from supatypes.plugin.handler import serve


@click.group()
@click.version_option(version=__version__, prog_name="supatypes")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """supatypes - Supabase Database types from a Prisma schema."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


@click.command()
def plugin_command() -> None:
    """Run as a Prisma generator (JSON-RPC over stdin/stderr)."""
    serve(click.get_text_stream("stdin"), click.get_text_stream("stderr"))


cli.add_command(generate_command, name="generate")
cli.add_command(plugin_command, name="plugin")


if __name__ == "__main__":
    cli()

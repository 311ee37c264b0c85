"""
Entry point for the CLI
"""

import click

from hellofn import __version__
from hellofn.cli.options import common_options, pass_context
from hellofn.commands.invoke.cli import cli as invoke_cli
from hellofn.commands.start_api.cli import cli as start_api_cli
from hellofn.lib.utils.hellofn_logging import configure_cli_logging


@click.group()
@common_options
@click.version_option(version=__version__, prog_name="hellofn")
@pass_context
def cli(ctx):
    """
    Greeting function with local invoke and a local HTTP server.
    """
    configure_cli_logging(debug=ctx.debug)


cli.add_command(invoke_cli)
cli.add_command(start_api_cli)

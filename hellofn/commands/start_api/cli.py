"""
CLI command for "start-api" command
"""

import logging

import click

from hellofn.cli.options import common_options, pass_context, print_cmdline_args
from hellofn.local.gateway import DEFAULT_HOST, DEFAULT_PATH, DEFAULT_PORT
from hellofn.local.lambdafn.provider import DEFAULT_FUNCTION_NAME

LOG = logging.getLogger(__name__)

HELP_TEXT = """
Serve the function locally over HTTP.
"""

DESCRIPTION = """
  Starts a local HTTP server with a single GET route in front of the function. The query string
  of each request is handed to the function as queryStringParameters, and the statusCode, headers
  and body it returns become the HTTP response.
"""


@click.command("start-api", help=HELP_TEXT + DESCRIPTION, short_help=HELP_TEXT)
@click.option("--host", default=DEFAULT_HOST, show_default=True, envvar="HELLOFN_HOST", help="Address to bind to.")
@click.option(
    "--port", "-p", default=DEFAULT_PORT, show_default=True, type=int, envvar="HELLOFN_PORT", help="Port to listen on."
)
@click.option("--path", default=DEFAULT_PATH, show_default=True, envvar="HELLOFN_PATH", help="Path of the GET route.")
@click.option(
    "--function",
    "function_name",
    default=DEFAULT_FUNCTION_NAME,
    show_default=True,
    envvar="HELLOFN_FUNCTION",
    help="Function served by the route.",
)
@click.option("--stage", default=None, help="Stage name reported in the request context.")
@common_options
@pass_context
@print_cmdline_args
def cli(ctx, host, port, path, function_name, stage):
    """
    `hellofn start-api` command entry point
    """
    do_cli(ctx, host, port, path, function_name, stage)  # pragma: no cover


def do_cli(ctx, host, port, path, function_name, stage):
    """
    Implementation of the ``cli`` method, just separated out for unit testing purposes
    """
    from hellofn.commands.exceptions import UserException
    from hellofn.local.gateway import LocalGateway
    from hellofn.local.lambdafn.provider import FunctionRegistry
    from hellofn.local.lambdafn.runner import LocalFunctionRunner

    provider = FunctionRegistry()
    if not provider.get(function_name):
        raise UserException(
            "Function {} not found. Possible options: {}".format(function_name, ", ".join(provider.get_all())),
            wrapped_from="FunctionNotFound",
        )

    gateway = LocalGateway(
        LocalFunctionRunner(provider, debugging=ctx.debug),
        function_name,
        path=path,
        host=host,
        port=port,
        stderr=click.get_text_stream("stderr"),
        stage_name=stage,
    )
    gateway.create()

    LOG.info("Mounting %s at http://%s:%s%s [GET]", function_name, host, port, gateway.path)
    LOG.info("Press CTRL+C to quit")

    try:
        gateway.run()
    except OSError as ex:
        raise UserException(str(ex), wrapped_from=ex.__class__.__name__) from ex

"""
CLI command for "invoke" command
"""

import logging

import click

from hellofn.cli.options import common_options, pass_context, print_cmdline_args
from hellofn.local.lambdafn.provider import DEFAULT_FUNCTION_NAME

LOG = logging.getLogger(__name__)

HELP_TEXT = """
Invoke the function locally with an event.
"""

STDIN_FILE_NAME = "-"
EMPTY_EVENT = "{}"


@click.command("invoke", help=HELP_TEXT, short_help=HELP_TEXT)
@click.option(
    "--event",
    "-e",
    type=click.Path(),
    help="JSON file containing event data passed to the function during invoke. If this option "
    "is not specified, an empty event is used. Pass in the value '-' to input JSON via stdin",
)
@common_options
@click.argument("function_name", required=False, default=DEFAULT_FUNCTION_NAME, envvar="HELLOFN_FUNCTION")
@pass_context
@print_cmdline_args
def cli(ctx, function_name, event):
    """
    `hellofn invoke` command entry point
    """
    do_cli(ctx, function_name, event)  # pragma: no cover


def do_cli(ctx, function_name, event):
    """
    Implementation of the ``cli`` method, just separated out for unit testing purposes
    """
    from hellofn.commands.exceptions import UserException
    from hellofn.local.lambdafn.exceptions import FunctionNotFound, InvalidEventException
    from hellofn.local.lambdafn.provider import FunctionRegistry
    from hellofn.local.lambdafn.runner import LocalFunctionRunner

    event_data = _get_event(event, exception_class=UserException) if event else EMPTY_EVENT

    runner = LocalFunctionRunner(FunctionRegistry(), debugging=ctx.debug)

    try:
        output, is_error = runner.invoke(function_name, event_data, stderr=click.get_text_stream("stderr"))
    except FunctionNotFound as ex:
        raise UserException("Function {} not found".format(function_name), wrapped_from=ex.__class__.__name__) from ex
    except InvalidEventException as ex:
        raise UserException(str(ex), wrapped_from=ex.__class__.__name__) from ex

    if is_error:
        LOG.debug("Function %s returned an error document", function_name)

    click.echo(output)


def _get_event(event_file_name, exception_class):
    """
    Read the event JSON data from the given file, or from stdin when the name is '-'.

    :param string event_file_name: Path to event file, or '-' for stdin
    :return string: Contents of the event file or stdin
    """
    if event_file_name == STDIN_FILE_NAME:
        LOG.debug("Reading invoke payload from stdin (you can also pass it from file with --event)")

    # click.open_file knows to open stdin when filename is '-'
    try:
        with click.open_file(event_file_name, "r", encoding="utf-8") as fp:
            return fp.read()
    except OSError as ex:
        raise exception_class(str(ex), wrapped_from=ex.__class__.__name__) from ex

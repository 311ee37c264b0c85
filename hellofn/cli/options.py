"""
Common CLI options and decorators shared by all commands
"""

import logging

import click

from .context import Context

LOG = logging.getLogger(__name__)

pass_context = click.make_pass_decorator(Context, ensure=True)


def debug_option(f):
    """
    Configures --debug option for CLI

    :param f: Callback Function to be passed to Click
    """

    def callback(ctx, param, value):
        state = ctx.ensure_object(Context)
        state.debug = state.debug or value
        return value

    return click.option(
        "--debug",
        expose_value=False,
        is_flag=True,
        envvar="HELLOFN_DEBUG",
        help="Turn on debug logging.",
        callback=callback,
    )(f)


def common_options(f):
    """
    Common CLI options used by all commands. Ex: --debug
    :param f: Callback function passed by Click
    :return: Callback function
    """
    f = debug_option(f)
    return f


def print_cmdline_args(func):
    """
    Logs the command line arguments at debug level before running the command
    """

    def wrapper(*args, **kwargs):
        LOG.debug("Expand command line arguments to:")
        cmdline_args_log = ""
        for key, value in kwargs.items():
            if isinstance(value, bool) and value:
                cmdline_args_log += f"--{key} "
            elif value:
                cmdline_args_log += f"--{key}={str(value)} "
        LOG.debug(cmdline_args_log)
        return func(*args, **kwargs)

    return wrapper

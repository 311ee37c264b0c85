"""
Errors reported to the user by the CLI
"""

import click


class UserException(click.ClickException):
    """
    A failure the user can act on. click prints ``Error: <message>`` and exits with status 1.

    ``wrapped_from`` names the exception class this one was raised from, if any.
    """

    def __init__(self, message, wrapped_from=None):
        super().__init__(message)
        self.wrapped_from = wrapped_from

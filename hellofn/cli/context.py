"""
State shared by the CLI commands
"""

from hellofn.lib.utils.hellofn_logging import configure_cli_logging


class Context:
    """
    Object click hands to every command decorated with ``pass_context``. Only carries the debug flag.
    """

    def __init__(self):
        self._debug = False

    @property
    def debug(self):
        return self._debug

    @debug.setter
    def debug(self, value):
        # switching debug on reconfigures logging right away, before any command runs
        self._debug = value

        if self._debug:
            configure_cli_logging(debug=True)

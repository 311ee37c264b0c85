"""
Runs registered functions in the current process
"""

import json
import logging
import traceback
from typing import Optional, TextIO, Tuple

from hellofn.local.lambdafn.context import LambdaContext
from hellofn.local.lambdafn.exceptions import FunctionNotFound, InvalidEventException
from hellofn.local.lambdafn.provider import FunctionRegistry

LOG = logging.getLogger(__name__)


class LocalFunctionRunner:
    """
    Invokes functions with a JSON event and hands back their result as JSON text, the way the Lambda
    service reports it to its caller.
    """

    def __init__(self, function_provider: FunctionRegistry, debugging: bool = False) -> None:
        self.provider = function_provider
        self._debugging = debugging

    def invoke(self, function_identifier: str, event: str, stderr: Optional[TextIO] = None) -> Tuple[str, bool]:
        """
        Calls the named function with the decoded event.

        A function that raises, or that returns something JSON cannot encode, does not fail the invoke:
        the output is then a Lambda error document and its traceback goes to ``stderr``.

        Parameters
        ----------
        function_identifier str
            Name of the function to invoke
        event str
            Event as a JSON document. An empty string is the empty event.
        stderr io.TextIOBase
            Optional stream receiving tracebacks of failed invocations

        Returns
        -------
        str, bool
            JSON output of the function and whether it is an error document

        Raises
        ------
        FunctionNotFound
            When no function is registered under the given name
        InvalidEventException
            When the event is not valid JSON
        """
        handler = self.provider.get(function_identifier)
        if not handler:
            LOG.info("%s not found. Possible options: %s", function_identifier, self.provider.get_all())
            raise FunctionNotFound("Unable to find a Function with name '{}'".format(function_identifier))

        try:
            event_data = json.loads(event) if event else {}
        except ValueError as ex:
            raise InvalidEventException("Event must be valid JSON: {}".format(ex)) from ex

        LOG.debug("Invoking function '%s'", function_identifier)

        try:
            return json.dumps(handler(event_data, LambdaContext(function_identifier))), False
        except Exception as ex:  # pylint: disable=broad-except
            if stderr:
                stderr.write(traceback.format_exc())
                stderr.flush()
            return json.dumps(self._error_document(ex)), True

    def is_debugging(self) -> bool:
        return self._debugging

    @staticmethod
    def _error_document(exception: Exception) -> dict:
        return {
            "errorMessage": str(exception),
            "errorType": type(exception).__name__,
            "stackTrace": traceback.format_tb(exception.__traceback__),
        }

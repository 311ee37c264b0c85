"""
Serves one function on a single GET route, shaped like an API Gateway proxy integration
"""

import json
import logging
import time
import uuid
from typing import Dict, Optional, TextIO, Tuple

from flask import Flask, Response, jsonify, request
from werkzeug.serving import WSGIRequestHandler

from hellofn.local.lambdafn.exceptions import FunctionNotFound
from hellofn.local.lambdafn.runner import LocalFunctionRunner

LOG = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_PATH = "/hello"

MISSING_ROUTE_MESSAGE = "Missing Authentication Token"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class FunctionOutputError(Exception):
    """
    Raised when a function result cannot be turned into an HTTP response
    """


class LocalGateway:
    def __init__(
        self,
        lambda_runner: LocalFunctionRunner,
        function_name: str,
        path: str = DEFAULT_PATH,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        stderr: Optional[TextIO] = None,
        stage_name: Optional[str] = None,
    ):
        """
        Parameters
        ----------
        lambda_runner hellofn.local.lambdafn.runner.LocalFunctionRunner
            Runner the requests are invoked through
        function_name str
            Function behind the route
        path str
            Path of the GET route. A missing leading slash is added.
        stderr io.TextIOBase
            Optional stream for tracebacks of failed invocations
        stage_name str
            Optional stage reported in the request context
        """
        self.lambda_runner = lambda_runner
        self.function_name = function_name
        self.path = path if path.startswith("/") else "/" + path
        self.host = host
        self.port = port
        self.stderr = stderr
        self.stage_name = stage_name
        self._app = None

    def create(self) -> Flask:
        self._app = Flask(__name__, static_folder=None)
        self._app.url_map.strict_slashes = False

        # GET rules also answer HEAD; werkzeug drops the body
        self._app.add_url_rule(self.path, endpoint=self.function_name, view_func=self._handle_request, methods=["GET"])

        # Unknown paths and methods look the same as on API Gateway
        self._app.register_error_handler(404, self._missing_route)
        self._app.register_error_handler(405, self._missing_route)
        self._app.register_error_handler(500, self._internal_error)
        return self._app

    def run(self):
        """
        Serves requests until interrupted. Requests are handled in threads unless the runner is debugging.
        """
        if not self._app:
            raise RuntimeError("The application must be created before running")

        WSGIRequestHandler.protocol_version = "HTTP/1.1"
        LOG.debug("Local gateway listening on %s:%s", self.host, self.port)
        self._app.run(threaded=not self.lambda_runner.is_debugging(), host=self.host, port=self.port)

    def _handle_request(self):
        event = build_event(request, self.path, self.stage_name)

        try:
            output, is_error = self.lambda_runner.invoke(self.function_name, json.dumps(event), stderr=self.stderr)
        except FunctionNotFound:
            LOG.error("Function %s is not registered", self.function_name)
            return self._error_response(502, INTERNAL_ERROR_MESSAGE)

        if is_error:
            LOG.error("Function %s failed: %s", self.function_name, output)
            return self._error_response(502, INTERNAL_ERROR_MESSAGE)

        try:
            status_code, headers, body = parse_function_output(output)
        except FunctionOutputError as ex:
            LOG.error("Invalid function response: %s", ex)
            return self._error_response(502, INTERNAL_ERROR_MESSAGE)

        return Response(body, status=status_code, headers=headers)

    def _missing_route(self, error):
        return self._error_response(403, MISSING_ROUTE_MESSAGE)

    def _internal_error(self, error):
        return self._error_response(502, INTERNAL_ERROR_MESSAGE)

    @staticmethod
    def _error_response(status_code: int, message: str):
        response = jsonify({"message": message})
        response.status_code = status_code
        return response


def build_event(flask_request, resource: str, stage_name: Optional[str] = None) -> Dict:
    """
    Request event for the function. Empty collections are sent as null, so a request without a query string
    has ``queryStringParameters: null``.
    """
    query = {}
    multi_value_query = {}
    for key, values in flask_request.args.lists():
        # repeated parameters: the last one wins
        query[key] = values[-1]
        multi_value_query[key] = values

    headers = dict(flask_request.headers.items())

    return {
        "resource": resource,
        "path": flask_request.path,
        "httpMethod": flask_request.method,
        "headers": headers or None,
        "queryStringParameters": query or None,
        "multiValueQueryStringParameters": multi_value_query or None,
        "body": flask_request.get_data(as_text=True) or None,
        "isBase64Encoded": False,
        "requestContext": {
            "resourcePath": resource,
            "httpMethod": flask_request.method,
            "path": flask_request.path,
            "stage": stage_name,
            "requestId": str(uuid.uuid4()),
            "requestTimeEpoch": int(time.time() * 1000),
            "identity": {"sourceIp": flask_request.remote_addr},
        },
    }


def parse_function_output(output: str) -> Tuple[int, Dict[str, str], str]:
    """
    Turns the JSON result of a function into status code, headers and body

    ``statusCode`` defaults to 200, ``Content-Type`` to application/json and a missing body to an empty one.

    Raises
    ------
    FunctionOutputError
        When the result is not a JSON object, or its status code or headers are unusable
    """
    try:
        result = json.loads(output)
    except ValueError as ex:
        raise FunctionOutputError("Function response must be valid JSON") from ex

    if not isinstance(result, dict):
        raise FunctionOutputError("Function returned {} instead of an object".format(type(result).__name__))

    status_code = result.get("statusCode", 200)
    if isinstance(status_code, bool) or not isinstance(status_code, int) or status_code <= 0:
        raise FunctionOutputError("statusCode must be a positive integer, got {!r}".format(status_code))

    headers = result.get("headers") or {}
    if not isinstance(headers, dict):
        raise FunctionOutputError("headers must be an object")
    headers = {key: str(value) for key, value in headers.items()}
    if not any(key.lower() == "content-type" for key in headers):
        headers["Content-Type"] = "application/json"

    body = result.get("body")
    return status_code, headers, "" if body is None else str(body)

"""
Context object handed to functions invoked locally
"""

import time
import uuid

DEFAULT_MEMORY_LIMIT_MB = 128
DEFAULT_TIMEOUT_SECONDS = 3

_FUNCTION_ARN_FORMAT = "arn:aws:lambda:us-east-1:123456789012:function:{}"


class LambdaContext:
    """
    Mirrors the attributes of the context the Lambda Python runtime passes to handlers
    """

    def __init__(self, function_name, memory_limit_in_mb=DEFAULT_MEMORY_LIMIT_MB, timeout=DEFAULT_TIMEOUT_SECONDS):
        self.function_name = function_name
        self.function_version = "$LATEST"
        self.invoked_function_arn = _FUNCTION_ARN_FORMAT.format(function_name)
        self.memory_limit_in_mb = memory_limit_in_mb
        self.aws_request_id = str(uuid.uuid4())
        self.log_group_name = "/aws/lambda/{}".format(function_name)
        self.log_stream_name = "$LATEST"
        self._deadline = time.monotonic() + timeout

    def get_remaining_time_in_millis(self):
        return max(0, int((self._deadline - time.monotonic()) * 1000))

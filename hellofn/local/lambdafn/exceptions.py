"""
Custom exception used by Local Lambda execution
"""


class FunctionNotFound(Exception):
    """
    Raised when the requested Lambda function is not found
    """


class InvalidEventException(Exception):
    """
    Raised when the event passed to a function is not a valid JSON document
    """

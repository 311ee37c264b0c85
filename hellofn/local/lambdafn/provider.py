"""
Registry of the functions that can be invoked locally
"""

import logging
from typing import Callable, Dict, List, Optional

from hellofn.handler import hello

LOG = logging.getLogger(__name__)

DEFAULT_FUNCTION_NAME = "hello"


class FunctionRegistry:
    def __init__(self, functions: Optional[Dict[str, Callable]] = None):
        """
        Parameters
        ----------
        functions dict
            Function name to handler callable. Defaults to the greeting function registered as ``hello``
        """
        self._functions = dict(functions) if functions is not None else {DEFAULT_FUNCTION_NAME: hello}

    def get(self, name: str) -> Optional[Callable]:
        """
        Returns the handler registered under the given name, or None
        """
        if not name:
            raise ValueError("Function name is required")

        return self._functions.get(name)

    def get_all(self) -> List[str]:
        return sorted(self._functions)

    def register(self, name: str, handler: Callable) -> None:
        LOG.debug("Registering function '%s'", name)
        self._functions[name] = handler

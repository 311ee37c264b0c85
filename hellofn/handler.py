"""
Greeting function served behind API Gateway
"""

import json
from collections.abc import Mapping
from typing import Any, Dict, Optional

DEFAULT_NAME = "Nobody"
NAME_PARAMETER = "name"
QUERY_STRING_PARAMETERS = "queryStringParameters"

HTTP_OK = 200


def hello(event: Optional[Dict[str, Any]], context: Any = None) -> Dict[str, Any]:
    """
    Greets whoever is named in the ``name`` query string parameter.

    Parameters
    ----------
    event dict
        API Gateway event. Only ``queryStringParameters`` is read.
    context
        Invocation context supplied by the host. Unused.

    Returns
    -------
    dict
        Response with ``statusCode`` 200 and a JSON ``body`` holding ``message``
    """
    name = resolve_name((event or {}).get(QUERY_STRING_PARAMETERS))

    return {
        "statusCode": HTTP_OK,
        "body": _to_json({"message": "Hello {}".format(name)}),
    }


def resolve_name(query_string_parameters: Any) -> str:
    """
    Returns the ``name`` parameter when it is usable, otherwise ``DEFAULT_NAME``.

    A parameter mapping that is missing, ``None`` or not a mapping at all counts as having no name.
    """
    if not isinstance(query_string_parameters, Mapping):
        return DEFAULT_NAME

    name = query_string_parameters.get(NAME_PARAMETER)
    if _is_usable_name(name):
        return name

    return DEFAULT_NAME


def _is_usable_name(name: Any) -> bool:
    """
    Only a non-empty string is a name. The empty string, ``None`` and non-string values such as ``42``
    (query string values are always strings, so those only come from hand-written events) are not.
    """
    return isinstance(name, str) and name != ""


def _to_json(payload: Dict[str, Any]) -> str:
    # Compact separators and raw unicode, the same text JSON.stringify produces
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

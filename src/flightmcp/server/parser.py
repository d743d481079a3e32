"""Request parser & validator — one raw line in, one validated request out."""

from __future__ import annotations

import json
from typing import Any

from flightmcp.server.errors import InvalidRequestError, ParseError
from flightmcp.server.models import JSONRPC_VERSION, JsonRpcRequest


def parse_request(line: str) -> JsonRpcRequest:
    """Decode *line* and check it is a JSON-RPC 2.0 request.

    Raises
    ------
    ParseError
        If *line* is not strict JSON (the id cannot be recovered).  The
        ``NaN``/``Infinity`` tokens and integers past the interpreter's
        digit limit count as invalid.
    InvalidRequestError
        If the value is not an object, has the wrong ``jsonrpc`` tag, or
        has no string ``method``.  Carries the request id when one is
        present.
    """
    try:
        decoded: Any = json.loads(line, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseError() from exc

    if not isinstance(decoded, dict):
        raise InvalidRequestError()

    request_id = decoded.get("id")
    method = decoded.get("method")
    if decoded.get("jsonrpc") != JSONRPC_VERSION or not isinstance(method, str) or not method:
        raise InvalidRequestError(request_id=request_id)

    params = decoded.get("params")
    return JsonRpcRequest(
        method=method,
        id=request_id,
        params=params if isinstance(params, dict) else {},
    )


def _reject_constant(token: str) -> Any:
    msg = f"non-standard JSON constant: {token}"
    raise ValueError(msg)

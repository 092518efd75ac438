import json
from typing import Any, Optional

from raiblocks_py.shared.models import ProtocolError, RpcResult, Success, TransportFailure


def _parse_json(body: str) -> Optional[Any]:
    try:
        return json.loads(body)
    except ValueError:
        return None


def classify_response(status_code: int, body: str) -> RpcResult:
    """Classify a raw HTTP answer from the node. No side effects.

    Args:
        status_code: HTTP status of the response.
        body: Response body text.

    Returns:
        Success for HTTP 200 with JSON, ProtocolError for HTTP 400 with a JSON
        object, TransportFailure for anything else.
    """
    if status_code == 200:
        payload = _parse_json(body)
        if payload is None:
            return TransportFailure(status=status_code, reason="Malformed JSON in response body")
        return Success(payload)

    if status_code == 400:
        payload = _parse_json(body)
        if not isinstance(payload, dict):
            return TransportFailure(status=status_code, reason="Malformed JSON in error body")
        return ProtocolError(message=str(payload.get("error", "")), payload=payload)

    return TransportFailure(status=status_code, reason=f"Unexpected HTTP status {status_code}")

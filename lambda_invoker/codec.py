import base64
import json
from typing import Any, Optional

from .types import EncodedRequest, InvocationMode, InvocationRequest

COMPACT_SEPARATORS = (",", ":")


def encode_payload(payload: Any, compress: bool = False) -> str:
    if compress:
        return json.dumps(payload, separators=COMPACT_SEPARATORS)
    return json.dumps(payload)


def encode_client_context(context: Any) -> Optional[str]:
    """Serialize the client context to JSON and base64 it, as the Invoke API expects."""
    if not context:
        return None
    return base64.b64encode(json.dumps(context).encode("utf-8")).decode("ascii")


def encode_request(request: InvocationRequest, mode: InvocationMode, compress: bool = False) -> EncodedRequest:
    # compress only applies to the payload; the client context is always default-encoded
    return EncodedRequest(
        mode=mode,
        function_name=request.function_name,
        payload=encode_payload(request.payload, compress),
        client_context=encode_client_context(request.client_context),
        qualifier=request.qualifier,
    )

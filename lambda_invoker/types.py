from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .constants import INVOCATION_TYPE_EVENT, INVOCATION_TYPE_REQUEST_RESPONSE, VALIDATION_ERROR_MESSAGE
from .exceptions import ValidationError


class InvocationMode(Enum):
    SYNCHRONOUS = INVOCATION_TYPE_REQUEST_RESPONSE
    FIRE_AND_FORGET = INVOCATION_TYPE_EVENT


@dataclass(frozen=True)
class InvocationRequest:
    function_name: str
    payload: Any
    client_context: Any = None
    qualifier: Optional[str] = None  # version or alias

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> "InvocationRequest":
        """
        Build a request from an options mapping.

        Accepts snake_case keys as well as the camelCase keys used by
        JavaScript-style callers (functionName, clientContext).
        """
        return InvocationRequest(
            function_name=data.get("function_name") or data.get("functionName"),
            payload=data.get("payload"),
            client_context=data.get("client_context") or data.get("clientContext"),
            qualifier=data.get("qualifier"),
        )

    @staticmethod
    def coerce(request: Union["InvocationRequest", Mapping[str, Any], None]) -> "InvocationRequest":
        if isinstance(request, InvocationRequest):
            return request
        if isinstance(request, Mapping):
            return InvocationRequest.from_mapping(request)
        raise ValidationError(VALIDATION_ERROR_MESSAGE)

    def validate(self) -> None:
        if not self.function_name or not self.payload:
            raise ValidationError(VALIDATION_ERROR_MESSAGE)

    def describe(self) -> Dict[str, Any]:
        return {
            "function_name": self.function_name,
            "payload": self.payload,
            "client_context": self.client_context,
            "qualifier": self.qualifier,
        }


@dataclass(frozen=True)
class EncodedRequest:
    mode: InvocationMode
    function_name: str
    payload: str
    client_context: Optional[str]  # base64, None when absent
    qualifier: Optional[str] = None

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "InvocationType": self.mode.value,
            "FunctionName": self.function_name,
            "Payload": self.payload,
            "ClientContext": self.client_context,
        }
        if self.qualifier:
            kwargs["Qualifier"] = self.qualifier
        return kwargs

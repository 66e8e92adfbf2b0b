from .client import LambdaInvoker
from .config import InvokerConfig
from .exceptions import ConfigError, InvocationError, RemoteInvocationError, ValidationError, is_logged, mark_logged
from .types import EncodedRequest, InvocationMode, InvocationRequest

__all__ = [
    "ConfigError",
    "EncodedRequest",
    "InvocationError",
    "InvocationMode",
    "InvocationRequest",
    "InvokerConfig",
    "LambdaInvoker",
    "RemoteInvocationError",
    "ValidationError",
    "is_logged",
    "mark_logged",
]

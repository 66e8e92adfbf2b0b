from typing import Any, Optional


class InvocationError(Exception):
    """Base class for errors raised by the invoker."""


class ValidationError(InvocationError, ValueError):
    """Raised when a request is missing its function name or payload."""


class RemoteInvocationError(InvocationError):
    """Raised by the bundled HTTP client when the Invoke API replies with a non-2xx status."""

    def __init__(self, message: str, function_name: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.function_name = function_name
        self.status_code = status_code
        self.body = body


class ConfigError(InvocationError):
    """Raised when the invoker configuration cannot be parsed."""


def mark_logged(error: BaseException) -> BaseException:
    """Flag an error as already recorded so outer handlers skip logging it again."""
    error.logged = True  # type: ignore[attr-defined]
    return error


def is_logged(error: BaseException) -> bool:
    return bool(getattr(error, "logged", False))

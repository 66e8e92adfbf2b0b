import os
from dataclasses import dataclass
from typing import Mapping, Optional

from . import constants
from .exceptions import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class InvokerConfig:
    """
    Configuration for the LambdaInvoker and its default boto3 client.
    Allows overriding defaults for local emulators and experimentation.
    """
    compress_payload: bool = False

    # Passed through to boto3; None lets botocore resolve them from the environment
    region_name: Optional[str] = None
    endpoint_url: Optional[str] = None

    max_workers: int = constants.DEFAULT_MAX_WORKERS

    connect_timeout_sec: float = constants.DEFAULT_CONNECT_TIMEOUT_SEC
    read_timeout_sec: float = constants.DEFAULT_READ_TIMEOUT_SEC
    max_attempts: int = constants.DEFAULT_MAX_ATTEMPTS

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "InvokerConfig":
        """
        Read configuration from LAMBDA_INVOKER_* variables.

        AWS_REGION / AWS_DEFAULT_REGION and AWS_ENDPOINT_URL are used as
        fallbacks for the region and endpoint.
        """
        env = os.environ if environ is None else environ
        defaults = InvokerConfig()

        def get(name: str) -> Optional[str]:
            return env.get(constants.ENV_PREFIX + name)

        return InvokerConfig(
            compress_payload=_parse_bool("COMPRESS_PAYLOAD", get("COMPRESS_PAYLOAD"), defaults.compress_payload),
            region_name=get("REGION") or env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION"),
            endpoint_url=get("ENDPOINT_URL") or env.get("AWS_ENDPOINT_URL"),
            max_workers=int(_parse_number("MAX_WORKERS", get("MAX_WORKERS"), defaults.max_workers)),
            connect_timeout_sec=_parse_number("CONNECT_TIMEOUT_SEC", get("CONNECT_TIMEOUT_SEC"), defaults.connect_timeout_sec),
            read_timeout_sec=_parse_number("READ_TIMEOUT_SEC", get("READ_TIMEOUT_SEC"), defaults.read_timeout_sec),
            max_attempts=int(_parse_number("MAX_ATTEMPTS", get("MAX_ATTEMPTS"), defaults.max_attempts)),
        )


def _parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{constants.ENV_PREFIX}{name} must be a boolean, got {raw!r}.")


def _parse_number(name: str, raw: Optional[str], default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{constants.ENV_PREFIX}{name} must be a number, got {raw!r}.") from e
    if value <= 0:
        raise ConfigError(f"{constants.ENV_PREFIX}{name} must be positive, got {raw!r}.")
    return value

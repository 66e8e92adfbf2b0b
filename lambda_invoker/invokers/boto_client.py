import logging
import threading
from typing import Any, Optional

import boto3
from botocore.config import Config

from ..config import InvokerConfig
from .abstract_client import AbstractLambdaClient

logger = logging.getLogger(__name__)


class BotoLambdaClient(AbstractLambdaClient):
    """
    Invokes functions through boto3's Lambda client.

    The boto3 client is created on first use, so building one needs neither
    credentials nor a region and performs no I/O.
    """

    def __init__(self, config: Optional[InvokerConfig] = None, session: Optional[boto3.session.Session] = None):
        self.config = config or InvokerConfig()
        self.session = session
        self._client: Any = None
        self._lock = threading.Lock()

    @property
    def client(self) -> Any:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._create_client()
        return self._client

    def _create_client(self) -> Any:
        botocore_config = Config(
            connect_timeout=self.config.connect_timeout_sec,
            read_timeout=self.config.read_timeout_sec,
            retries={"max_attempts": self.config.max_attempts},
        )
        factory = self.session.client if self.session else boto3.client
        logger.debug(
            "boto_client_create",
            extra={"invoker": {"region_name": self.config.region_name, "endpoint_url": self.config.endpoint_url}},
        )
        return factory(
            "lambda",
            region_name=self.config.region_name,
            endpoint_url=self.config.endpoint_url,
            config=botocore_config,
        )

    def invoke(self, **kwargs: Any) -> Any:
        # botocore rejects None for string parameters, so absent fields are dropped here
        params = {key: value for key, value in kwargs.items() if value is not None}
        return self.client.invoke(**params)

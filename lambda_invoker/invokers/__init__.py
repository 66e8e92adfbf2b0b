from .abstract_client import AbstractLambdaClient
from .boto_client import BotoLambdaClient
from .http_client import HttpLambdaClient

__all__ = ["AbstractLambdaClient", "BotoLambdaClient", "HttpLambdaClient"]

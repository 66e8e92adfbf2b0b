from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

from lambda_invoker import LambdaInvoker

FUNCTION_NAME = "functionName"
PAYLOAD = {"data": "blah"}
CLIENT_CONTEXT = {"context": "some-context"}


@pytest.fixture
def mock_lambda_client():
    client = MagicMock()
    client.invoke.return_value = {"StatusCode": 200, "Payload": '{"data": "test data"}'}
    return client


@pytest.fixture
def invoker(mock_lambda_client):
    return LambdaInvoker(client=mock_lambda_client)


def resolved(value):
    future = Future()
    future.set_result(value)
    return future


def rejected(error):
    future = Future()
    future.set_exception(error)
    return future

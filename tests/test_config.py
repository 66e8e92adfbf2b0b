import pytest

from lambda_invoker import ConfigError, InvokerConfig
from lambda_invoker.constants import DEFAULT_MAX_WORKERS
from lambda_invoker.executor import ExecutorManager


def test_defaults():
    config = InvokerConfig.from_env({})

    assert config == InvokerConfig()
    assert config.compress_payload is False
    assert config.max_workers == DEFAULT_MAX_WORKERS


def test_reads_prefixed_variables():
    config = InvokerConfig.from_env(
        {
            "LAMBDA_INVOKER_COMPRESS_PAYLOAD": "true",
            "LAMBDA_INVOKER_REGION": "us-east-2",
            "LAMBDA_INVOKER_ENDPOINT_URL": "http://localhost:4566",
            "LAMBDA_INVOKER_MAX_WORKERS": "8",
            "LAMBDA_INVOKER_READ_TIMEOUT_SEC": "30.5",
            "AWS_REGION": "eu-west-1",
        }
    )

    assert config.compress_payload is True
    assert config.region_name == "us-east-2"
    assert config.endpoint_url == "http://localhost:4566"
    assert config.max_workers == 8
    assert config.read_timeout_sec == 30.5


def test_falls_back_to_aws_variables():
    config = InvokerConfig.from_env({"AWS_DEFAULT_REGION": "ap-south-1", "AWS_ENDPOINT_URL": "http://emulator:4566"})

    assert config.region_name == "ap-south-1"
    assert config.endpoint_url == "http://emulator:4566"


@pytest.mark.parametrize(
    "env",
    [
        {"LAMBDA_INVOKER_COMPRESS_PAYLOAD": "maybe"},
        {"LAMBDA_INVOKER_MAX_WORKERS": "many"},
        {"LAMBDA_INVOKER_MAX_ATTEMPTS": "-1"},
    ],
)
def test_invalid_values_raise(env):
    with pytest.raises(ConfigError):
        InvokerConfig.from_env(env)


def test_executor_is_shared():
    assert ExecutorManager.get_executor() is ExecutorManager.get_executor()

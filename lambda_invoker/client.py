import logging
import time
from concurrent.futures import CancelledError, Executor, Future
from typing import Any, Callable, Mapping, Optional, Union

from .codec import encode_request
from .config import InvokerConfig
from .exceptions import mark_logged
from .executor import ExecutorManager
from .invokers import BotoLambdaClient
from .types import EncodedRequest, InvocationMode, InvocationRequest

Request = Union[InvocationRequest, Mapping[str, Any]]

# callback(error, result) -> outcome; exactly one of error/result is not None
Callback = Callable[[Optional[BaseException], Any], Any]


class LambdaInvoker:
    def __init__(
        self,
        client: Any = None,
        logger: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
        compress_payload: Optional[bool] = None,
        config: Optional[InvokerConfig] = None,
        executor: Optional[Executor] = None,
    ):
        self.config = config or InvokerConfig()
        self.compress_payload = self.config.compress_payload if compress_payload is None else compress_payload
        self.client = client if client is not None else BotoLambdaClient(self.config)
        self.logger = logger
        self.executor = executor or ExecutorManager.get_executor(self.config.max_workers)

    def invoke(self, request: Request, callback: Optional[Callback] = None) -> Future:
        """
        Invokes a function and waits for its response (RequestResponse).

        Args:
            request: An InvocationRequest or a mapping with function_name, payload
                and optionally client_context / qualifier.
            callback: Optional callback(error, result). When given it replaces the default
                result handling and its return value (a Future or a plain value) becomes the outcome.

        Returns:
            A concurrent.futures.Future resolving to the client's response, or failing
            with the validation or client error.
        """
        return self._invoke_with_mode(InvocationMode.SYNCHRONOUS, request, callback)

    def invoke_async(self, request: Request, callback: Optional[Callback] = None) -> Future:
        """
        Fire-and-forget variant of invoke() (Event). The result only reports that
        the service accepted the request.
        """
        return self._invoke_with_mode(InvocationMode.FIRE_AND_FORGET, request, callback)

    def _invoke_with_mode(self, mode: InvocationMode, request: Request, callback: Optional[Callback]) -> Future:
        handler = callback or self._default_callback(mode, request)
        outcome: Future = Future()

        try:
            invocation = InvocationRequest.coerce(request)
            invocation.validate()
            encoded = encode_request(invocation, mode, compress=self.compress_payload)
        except (TypeError, ValueError) as e:
            # ValidationError is a ValueError; TypeError/ValueError also cover unserializable payloads
            _settle(outcome, handler, e, None)
            return outcome

        if self.logger is not None:
            self.logger.debug(
                "lambda_invoke_start",
                extra={
                    "invoker": {
                        "mode": mode.name,
                        "request": invocation.describe(),
                        "ts_ms": int(time.time() * 1000),
                        "payload_size": len(encoded.payload.encode("utf-8")),
                    }
                },
            )

        self.executor.submit(self._dispatch, encoded, handler, outcome)
        return outcome

    def _dispatch(self, encoded: EncodedRequest, handler: Callback, outcome: Future) -> None:
        # cancelled before the worker picked it up
        if not outcome.set_running_or_notify_cancel():
            return

        try:
            result = self.client.invoke(**encoded.to_kwargs())
        except Exception as e:
            _settle(outcome, handler, e, None)
            return

        _settle(outcome, handler, None, result)

    def _default_callback(self, mode: InvocationMode, request: Request) -> Callback:
        logger = self.logger

        def default_callback(error: Optional[BaseException], result: Any) -> Future:
            future: Future = Future()
            if error is not None:
                if logger is not None:
                    logger.error(
                        "lambda_invoke_failed",
                        extra={"invoker": {"mode": mode.name, "request": _describe(request), "error": repr(error)}},
                    )
                mark_logged(error)
                future.set_exception(error)
                return future

            if logger is not None:
                logger.info("lambda_invoke_succeeded", extra={"invoker": {"mode": mode.name, "result": result}})
            future.set_result(result)
            return future

        return default_callback


def _describe(request: Any) -> Any:
    if isinstance(request, InvocationRequest):
        return request.describe()
    if isinstance(request, Mapping):
        return dict(request)
    return repr(request)


def _settle(outcome: Future, handler: Callback, error: Optional[BaseException], result: Any) -> None:
    """Runs the handler and resolves outcome with whatever it returns."""
    try:
        value = handler(error, result)
    except Exception as e:
        _set_exception(outcome, e)
        return

    if isinstance(value, Future):
        value.add_done_callback(lambda source: _copy_state(source, outcome))
    else:
        _set_result(outcome, value)


def _copy_state(source: Future, target: Future) -> None:
    if source.cancelled():
        _set_exception(target, CancelledError())
        return
    error = source.exception()
    if error is not None:
        _set_exception(target, error)
    else:
        _set_result(target, source.result())


def _set_result(future: Future, value: Any) -> None:
    if not future.cancelled():
        future.set_result(value)


def _set_exception(future: Future, error: BaseException) -> None:
    if not future.cancelled():
        future.set_exception(error)


from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from .client import LambdaInvoker
from .config import InvokerConfig
from .exceptions import ConfigError
from .invokers import HttpLambdaClient
from .types import InvocationRequest


def _parse_json(parser: argparse.ArgumentParser, flag: str, raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        parser.error(f"{flag} is not valid JSON: {e}")


def describe_result(result: Any) -> Dict[str, Any]:
    """Summarise a boto3-style invoke response, reading streaming payload bodies."""
    if not isinstance(result, Mapping):
        return {"StatusCode": None, "FunctionError": None, "Payload": result}

    payload = result.get("Payload")
    if hasattr(payload, "read"):
        payload = payload.read()
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")

    return {
        "StatusCode": result.get("StatusCode"),
        "FunctionError": result.get("FunctionError"),
        "Payload": payload,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Invoke a Lambda function once and print its response.")
    parser.add_argument("--function", required=True, help="Function name, ARN or partial ARN.")
    parser.add_argument("--payload", required=True, help="JSON payload; must not be empty (e.g. {\"key\": 1}).")
    parser.add_argument("--client-context", default=None, help="JSON client context, sent base64-encoded.")
    parser.add_argument("--qualifier", default=None, help="Version or alias to invoke.")
    parser.add_argument("--async", dest="fire_and_forget", action="store_true", help="Use the Event invocation type.")
    parser.add_argument("--compress", action="store_true", default=None, help="Send the payload as compact JSON.")
    parser.add_argument("--endpoint-url", default=None, help="Override the Lambda endpoint (e.g. LocalStack).")
    parser.add_argument("--region", default=None, help="AWS region.")
    parser.add_argument("--http", action="store_true", help="Call the Invoke REST API with requests instead of boto3.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    try:
        config = InvokerConfig.from_env()
    except ConfigError as e:
        parser.error(str(e))

    config = replace(
        config,
        region_name=args.region or config.region_name,
        endpoint_url=args.endpoint_url or config.endpoint_url,
        compress_payload=config.compress_payload if args.compress is None else args.compress,
    )

    client = None
    if args.http:
        if not config.endpoint_url:
            parser.error("--http requires --endpoint-url (or AWS_ENDPOINT_URL)")
        client = HttpLambdaClient(
            config.endpoint_url,
            connect_timeout_sec=config.connect_timeout_sec,
            read_timeout_sec=config.read_timeout_sec,
        )

    invoker = LambdaInvoker(client=client, logger=logging.getLogger(__name__), config=config)
    payload = _parse_json(parser, "--payload", args.payload)
    if not payload:
        parser.error("--payload must be a non-empty JSON value")

    request = InvocationRequest(
        function_name=args.function,
        payload=payload,
        client_context=_parse_json(parser, "--client-context", args.client_context),
        qualifier=args.qualifier,
    )

    invoke = invoker.invoke_async if args.fire_and_forget else invoker.invoke
    try:
        result = invoke(request).result()
    except Exception as e:
        print(f"ERROR: invocation of {args.function} failed: {e!r}", file=sys.stderr)
        return 1

    summary = describe_result(result)
    print(f"{summary['StatusCode']} {summary['FunctionError'] or ''}".rstrip())
    if summary["Payload"]:
        print(summary["Payload"])
    return 0


if __name__ == "__main__":
    sys.exit(main())

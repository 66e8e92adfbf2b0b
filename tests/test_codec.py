import base64
import json

from lambda_invoker import InvocationMode, InvocationRequest
from lambda_invoker.codec import encode_client_context, encode_payload, encode_request


def test_encode_payload_matches_json_dumps():
    payload = {"data": "blah", "nested": {"n": [1, 2, 3]}}

    assert encode_payload(payload) == json.dumps(payload)


def test_encode_payload_compress_strips_whitespace():
    assert encode_payload({"a": 1, "b": [1, 2]}, compress=True) == '{"a":1,"b":[1,2]}'


def test_encode_client_context_is_base64_json():
    context = {"custom": {"tenant": "acme"}, "client": {"app_title": "web"}}

    encoded = encode_client_context(context)

    assert json.loads(base64.b64decode(encoded)) == context


def test_encode_client_context_absent_is_none():
    assert encode_client_context(None) is None
    assert encode_client_context({}) is None


def test_encode_request_keeps_mode_and_omits_missing_qualifier():
    request = InvocationRequest(function_name="fn", payload={"x": 1})

    encoded = encode_request(request, InvocationMode.FIRE_AND_FORGET)

    assert encoded.to_kwargs() == {
        "InvocationType": "Event",
        "FunctionName": "fn",
        "Payload": '{"x": 1}',
        "ClientContext": None,
    }


def test_encode_request_with_qualifier():
    request = InvocationRequest(function_name="fn", payload=[1], qualifier="3")

    kwargs = encode_request(request, InvocationMode.SYNCHRONOUS, compress=True).to_kwargs()

    assert kwargs["InvocationType"] == "RequestResponse"
    assert kwargs["Qualifier"] == "3"
    assert kwargs["Payload"] == "[1]"


def test_request_from_mapping_prefers_snake_case():
    request = InvocationRequest.from_mapping({"function_name": "a", "functionName": "b", "payload": 1})

    assert request.function_name == "a"
    assert request.payload == 1


def test_request_from_mapping_falls_back_to_camel_case_when_snake_case_is_none():
    request = InvocationRequest.from_mapping(
        {"function_name": None, "functionName": "b", "payload": 1, "client_context": None, "clientContext": {"c": 1}}
    )

    assert request.function_name == "b"
    assert request.client_context == {"c": 1}

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from ..constants import DEFAULT_CONNECT_TIMEOUT_SEC, DEFAULT_READ_TIMEOUT_SEC, INVOKE_PATH_TEMPLATE
from ..exceptions import RemoteInvocationError
from .abstract_client import AbstractLambdaClient


class HttpLambdaClient(AbstractLambdaClient):
    """
    Calls the Lambda Invoke REST API directly over HTTP.

    Intended for unsigned endpoints such as LocalStack or ``sam local start-lambda``.
    """

    def __init__(
        self,
        endpoint_url: str,
        session: Optional[requests.Session] = None,
        connect_timeout_sec: float = DEFAULT_CONNECT_TIMEOUT_SEC,
        read_timeout_sec: float = DEFAULT_READ_TIMEOUT_SEC,
    ):
        self.endpoint_url = endpoint_url.rstrip("/")
        self.session = session
        self.timeout = (connect_timeout_sec, read_timeout_sec)

    def _build_url(self, function_name: str) -> str:
        return self.endpoint_url + INVOKE_PATH_TEMPLATE.format(function_name=quote(function_name, safe=""))

    def invoke(self, **kwargs: Any) -> Dict[str, Any]:
        """
        Posts the payload and returns a dict shaped like boto3's invoke response,
        with Payload holding the response body as text.
        """
        function_name = kwargs["FunctionName"]
        headers = {
            "Content-Type": "application/json",
            "X-Amz-Invocation-Type": kwargs["InvocationType"],
        }
        if kwargs.get("ClientContext"):
            headers["X-Amz-Client-Context"] = kwargs["ClientContext"]

        params = {}
        if kwargs.get("Qualifier"):
            params["Qualifier"] = kwargs["Qualifier"]

        post = self.session.post if self.session else requests.post
        response = post(
            self._build_url(function_name),
            headers=headers,
            params=params,
            data=kwargs["Payload"],
            timeout=self.timeout,
        )

        if not 200 <= response.status_code < 300:
            raise RemoteInvocationError(
                f"Invocation of {function_name} failed with status {response.status_code}",
                function_name=function_name,
                status_code=response.status_code,
                body=response.text,
            )

        return {
            "StatusCode": response.status_code,
            "FunctionError": response.headers.get("X-Amz-Function-Error"),
            "ExecutedVersion": response.headers.get("X-Amz-Executed-Version"),
            "Payload": response.text,
        }

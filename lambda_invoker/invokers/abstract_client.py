from abc import ABC, abstractmethod
from typing import Any


class AbstractLambdaClient(ABC):
    """
    Abstract interface for a remote function-invocation client.
    Mirrors the keyword signature of boto3's Lambda ``invoke``.
    """

    @abstractmethod
    def invoke(self, **kwargs: Any) -> Any:
        """
        Invokes a remote function.

        Args:
            **kwargs: The encoded request: InvocationType, FunctionName, Payload (JSON string),
                ClientContext (base64 string or None) and, when set, Qualifier.

        Returns:
            The raw response of the invocation service. Raises on failure.
        """
        pass

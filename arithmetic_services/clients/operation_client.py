"""Operation Service Client: thin async wrapper over one POST / round trip.

Invariants:
    - No client-side validation: the request goes out as given
    - Non-2xx status -> OperationServiceError naming the service and the status, no retry
    - 2xx -> the parsed JSON body, returned as-is
    - Transport failures (httpx.TransportError) propagate unchanged

Design Decisions:
    - One class parametrized by service name instead of four copies
    - Injected httpx.AsyncClient is borrowed, never closed; without one each call
      opens and closes its own client, unless inside `async with`
"""

import logging
from typing import Protocol, TypedDict

import httpx

from arithmetic_services.core.domain_types import Number, Operation
from arithmetic_services.core.errors import OperationServiceError

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


class OperationServiceRequest(TypedDict):
    a: Number
    b: Number


class OperationServiceResponse(TypedDict):
    result: Number


class OperationServiceClientProtocol(Protocol):
    """Structural contract shared by the four service clients."""
    async def call(
        self, request: OperationServiceRequest,
    ) -> OperationServiceResponse: ...


class OperationServiceClient:
    """Client for a single operation service."""

    def __init__(
        self,
        base_url: str,
        service_name: str,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.service_name = service_name
        self._http_client = http_client
        self._owns_client = False

    async def __aenter__(self) -> "OperationServiceClient":
        """Keep one connection pool open for calls made inside the block."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(follow_redirects=True)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._owns_client:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_client = False

    async def call(
        self, request: OperationServiceRequest,
    ) -> OperationServiceResponse:
        """POST the operands and return the decoded response body."""
        response = await self._post(dict(request))
        if not response.is_success:
            logger.warning(
                f"{self.service_name} returned status {response.status_code}",
                extra={
                    "service": self.service_name,
                    "status_code": response.status_code,
                },
            )
            raise OperationServiceError(self.service_name, response.status_code)
        return response.json()

    async def _post(self, payload: dict) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self.base_url, json=payload, headers=_JSON_HEADERS,
            )
        async with httpx.AsyncClient(follow_redirects=True) as client:
            return await client.post(
                self.base_url, json=payload, headers=_JSON_HEADERS,
            )


def create_operation_client(
    operation: Operation,
    base_url: str,
    http_client: httpx.AsyncClient | None = None,
) -> OperationServiceClient:
    return OperationServiceClient(
        base_url, operation.display_name, http_client=http_client,
    )


def create_adder_service_client(
    base_url: str, http_client: httpx.AsyncClient | None = None,
) -> OperationServiceClient:
    """Client for the Adder Service at `base_url`."""
    return create_operation_client(Operation.ADD, base_url, http_client)


def create_subtractor_service_client(
    base_url: str, http_client: httpx.AsyncClient | None = None,
) -> OperationServiceClient:
    """Client for the Subtractor Service at `base_url`."""
    return create_operation_client(Operation.SUBTRACT, base_url, http_client)


def create_multiplier_service_client(
    base_url: str, http_client: httpx.AsyncClient | None = None,
) -> OperationServiceClient:
    """Client for the Multiplier Service at `base_url`."""
    return create_operation_client(Operation.MULTIPLY, base_url, http_client)


def create_divider_service_client(
    base_url: str, http_client: httpx.AsyncClient | None = None,
) -> OperationServiceClient:
    """Client for the Divider Service at `base_url`."""
    return create_operation_client(Operation.DIVIDE, base_url, http_client)

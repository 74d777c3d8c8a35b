"""Service Clients: typed async wrappers, one per operation service."""

from arithmetic_services.clients.operation_client import (
    OperationServiceClient,
    OperationServiceClientProtocol,
    OperationServiceRequest,
    OperationServiceResponse,
    create_adder_service_client,
    create_divider_service_client,
    create_multiplier_service_client,
    create_operation_client,
    create_subtractor_service_client,
)
from arithmetic_services.core.errors import OperationServiceError

__all__ = [
    "OperationServiceClient",
    "OperationServiceClientProtocol",
    "OperationServiceError",
    "OperationServiceRequest",
    "OperationServiceResponse",
    "create_adder_service_client",
    "create_divider_service_client",
    "create_multiplier_service_client",
    "create_operation_client",
    "create_subtractor_service_client",
]

"""Custom action webhook relay."""

from .client import ExternalServiceClient, ExternalServiceResult, relay_text, validate_url
from .errors import ExternalServiceError
from .schemas import ExternalServiceRequest, ExternalServiceResponse
from .service import call_external_service, run_custom_action

__all__ = [
    "ExternalServiceClient",
    "ExternalServiceError",
    "ExternalServiceRequest",
    "ExternalServiceResponse",
    "ExternalServiceResult",
    "call_external_service",
    "relay_text",
    "run_custom_action",
    "validate_url",
]

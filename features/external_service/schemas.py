"""Request body and UI response record of the webhook relay."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from core.pydantic_schemas import ClientResponse
from core.result import Ok

if TYPE_CHECKING:
    from .client import ExternalServiceResult


class ExternalServiceRequest(BaseModel):
    """JSON body posted to the webhook."""

    text: str


class ExternalServiceResponse(ClientResponse):
    response: Optional[str] = None

    @classmethod
    def from_result(cls, result: "ExternalServiceResult") -> "ExternalServiceResponse":
        if isinstance(result, Ok):
            return cls(success=True, response=result.value)
        return cls(**cls.error_fields(result.error))


__all__ = ["ExternalServiceRequest", "ExternalServiceResponse"]

"""Flat success/error records returned to the UI layer."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from core.errors import ErrorKind


class ClientResponse(BaseModel):
    """Common shape of every API client response.

    A successful response carries no error fields; a failed response always
    carries both ``error_type`` and ``error_message``.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_error_fields(self) -> "ClientResponse":
        if self.success:
            if self.error_type is not None or self.error_message is not None:
                raise ValueError("Successful responses must not carry error fields")
        elif not self.error_type or not self.error_message:
            raise ValueError("Failed responses require error_type and error_message")
        return self

    @staticmethod
    def error_fields(error: ErrorKind) -> Dict[str, Any]:
        """Return the failure fields derived from an error kind."""

        return {
            "success": False,
            "error_type": error.tag,
            "error_message": error.user_message(),
        }


__all__ = ["ClientResponse"]

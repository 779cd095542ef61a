"""Response record returned to the UI for transcription requests."""

from __future__ import annotations

from typing import Optional

from pydantic import model_validator

from core.pydantic_schemas import ClientResponse
from core.result import Ok

from .client import TranscriptionResult


class TranscriptionResponse(ClientResponse):
    """Transcription outcome flattened for the UI.

    ``retryable`` is only set on failure and tells the UI whether a manual
    retry is likely to succeed.
    """

    text: Optional[str] = None
    retryable: Optional[bool] = None

    @model_validator(mode="after")
    def _check_payload(self) -> "TranscriptionResponse":
        if self.success and self.retryable is not None:
            raise ValueError("Successful responses must not carry a retryable flag")
        if not self.success and self.retryable is None:
            raise ValueError("Failed responses require a retryable flag")
        return self

    @classmethod
    def from_result(cls, result: TranscriptionResult) -> "TranscriptionResponse":
        if isinstance(result, Ok):
            return cls(success=True, text=result.value.text)
        error = result.error
        return cls(**cls.error_fields(error), retryable=error.is_transient)


__all__ = ["TranscriptionResponse"]

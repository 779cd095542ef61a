"""Response record returned to the UI for summarization requests."""

from __future__ import annotations

from typing import Optional

from core.pydantic_schemas import ClientResponse
from core.result import Ok

from .client import SummarizationResult


class SummarizationResponse(ClientResponse):
    summary: Optional[str] = None

    @classmethod
    def from_result(cls, result: SummarizationResult) -> "SummarizationResponse":
        if isinstance(result, Ok):
            return cls(success=True, summary=result.value.summary)
        return cls(**cls.error_fields(result.error))


__all__ = ["SummarizationResponse"]

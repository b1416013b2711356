"""Error envelope written for failed requests.

Serialized as {"code": "...", "error": "..."}. Empty fields are left out of
the payload, so a response carrying only a code renders as {"code": "..."}.

Pydantic v2. Extra fields are forbidden to prevent drift.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class ErrorResponse(BaseModel):
    """Contract used for failures."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    code: str = Field(default="", description="Machine-readable error code")
    message: str = Field(default="", alias="error", description="Human-readable error message")

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value}

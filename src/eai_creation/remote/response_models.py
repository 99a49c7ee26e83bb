"""Pydantic models for naming and persistence service responses.

Design Principles:
- Graceful degradation: extra="allow" for unknown fields
- Wire names kept as aliases, snake_case attributes in code

Usage:
    mo = ManagedObjectDto.model_validate(response.json())
    mo_id = mo.po_id
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class NamingBinding(BaseModel):
    """Response from GET /naming/{name}.

    Attributes:
        name: Name the object is bound under
        endpoint: Base URL of the bound service home
    """

    name: str | None = Field(None, description="Bound name")
    endpoint: str = Field(..., description="Base URL of the bound service home")

    model_config = {"extra": "allow"}


class SessionResponse(BaseModel):
    """Response from POST {endpoint}/sessions (service home create)."""

    session_id: str = Field(..., alias="sessionId", description="Service session id")

    model_config = {"extra": "allow", "populate_by_name": True}


class CreatePoResponse(BaseModel):
    """Response from POST {endpoint}/pos."""

    po_id: int = Field(..., alias="poId", description="Id of the created PO")

    model_config = {"extra": "allow", "populate_by_name": True}


class ManagedObjectDto(BaseModel):
    """Managed object returned by GET {endpoint}/mos.

    Attributes:
        po_id: Persistence id of the MO
        fdn: Fully distinguished name
        type: MO type
        namespace: MO namespace
        version: MO model version
        attributes: Remaining MO attributes
    """

    po_id: int = Field(..., alias="poId", description="Persistence id of the MO")
    fdn: str | None = Field(None, description="Fully distinguished name")
    type: str | None = Field(None, description="MO type")
    namespace: str | None = Field(None, description="MO namespace")
    version: str | None = Field(None, description="MO model version")
    attributes: dict[str, Any] = Field(default_factory=dict, description="MO attributes")

    model_config = {"extra": "allow", "populate_by_name": True}

    @field_validator("po_id")
    @classmethod
    def validate_po_id_positive(cls, v: int) -> int:
        """Ensure the PO id is positive."""
        if v <= 0:
            raise ValueError(f"PO id must be positive, got {v}")
        return v


class ErrorResponse(BaseModel):
    """Error body returned by either service."""

    message: str | None = None
    code: str | None = None
    detail: str | None = None

    model_config = {"extra": "allow"}

    def get_full_message(self) -> str:
        """Combine message, code and detail into one line."""
        msg = self.message or self.detail or "Unknown error"
        if self.code:
            msg += f" (Code: {self.code})"
        if self.detail and self.detail != msg and self.message:
            detail = self.detail
            if len(detail) > 200:
                detail = detail[:197] + "..."
            msg += f" - {detail}"
        return msg

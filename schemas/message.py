from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be empty")
    return v


class MessageCreate(BaseModel):
    """Schema for submitting a message."""

    remetente_nome: str = Field(..., max_length=255)
    destinatario_nome: str = Field(..., max_length=255)
    mensagem: str

    @field_validator("remetente_nome", "destinatario_nome", "mensagem")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        return _strip_required(v)


class MessageUpdate(BaseModel):
    """Schema for editing a message. Only recipient and body are mutable."""

    model_config = ConfigDict(extra="ignore")

    destinatario_nome: str | None = Field(default=None, max_length=255)
    mensagem: str | None = None

    @field_validator("destinatario_nome", "mensagem")
    @classmethod
    def validate_not_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _strip_required(v)

    def changes(self) -> dict[str, str]:
        """Fields actually provided."""
        return self.model_dump(exclude_none=True)


class MessageResponse(BaseModel):
    """Schema for message response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    remetente_nome: str
    destinatario_nome: str
    mensagem: str
    is_printed: bool = Field(serialization_alias="isprinted")
    printed_at: datetime | None
    created_at: datetime
    status: str


class MessageSummary(BaseModel):
    """Message projection without the body, for notification badges."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    remetente_nome: str
    destinatario_nome: str
    created_at: datetime
    is_printed: bool = Field(serialization_alias="isprinted")


class MessageStats(BaseModel):
    """Aggregate counts over active messages."""

    total: int = 0
    printed_count: int = Field(default=0, serialization_alias="printed")
    unique_recipients: int = Field(default=0, serialization_alias="uniqueRecipients")
    recent_count: int = Field(default=0, serialization_alias="recent")

"""Pydantic models for Certification drafts and read views."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from careerlog.errors.exceptions import ValidationError


class CertificationDraft(BaseModel):
    """Form data for adding or editing a certification."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    obtained_date: date = Field(default_factory=date.today)
    expiration_date: date | None = None
    certification_number: str | None = None
    memo: str | None = None

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()

    @field_validator("certification_number", "memo")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    def validate_for_save(self) -> None:
        if not self.name:
            raise ValidationError("Certification name is required", details={"field": "name"})


class Certification(BaseModel):
    """Read view of a stored certification with its expiry status."""

    model_config = ConfigDict(extra="forbid")

    certification_id: str
    name: str
    obtained_date: date
    expiration_date: date | None = None
    certification_number: str | None = None
    memo: str | None = None
    is_expiring: bool
    is_expired: bool
    status_text: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

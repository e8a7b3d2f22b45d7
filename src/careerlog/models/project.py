"""Pydantic models for Project drafts and read views."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from careerlog.errors.exceptions import ValidationError
from careerlog.models.enums import Industry, Role, TeamSize


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class ProjectDraft(BaseModel):
    """Form data collected over the add/edit project steps.

    A draft may be incomplete while it is being edited; call
    ``validate_for_save()`` before handing it to the store.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = ""
    start_date: date = Field(default_factory=date.today)
    end_date: date | None = None
    is_ongoing: bool = False
    industry: Industry | None = None
    role: Role | None = None
    team_size: TeamSize | None = None
    selected_technologies: list[str] = Field(default_factory=list)
    selected_processes: list[str] = Field(default_factory=list)
    overview: str | None = None
    responsibilities: str | None = None
    achievements: str | None = None

    @field_validator("overview", "responsibilities", "achievements")
    @classmethod
    def _normalize_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)

    @field_validator("selected_technologies", "selected_processes")
    @classmethod
    def _dedupe_names(cls, names: list[str]) -> list[str]:
        seen: list[str] = []
        for name in names:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen

    @property
    def is_basic_info_valid(self) -> bool:
        return bool(self.name.strip())

    @property
    def effective_end_date(self) -> date | None:
        """Ongoing projects never carry an end date."""
        return None if self.is_ongoing else self.end_date

    def validate_for_save(self) -> None:
        if not self.is_basic_info_valid:
            raise ValidationError("Project name is required", details={"field": "name"})
        end = self.effective_end_date
        if end is not None and end < self.start_date:
            raise ValidationError(
                "End date must not be before start date",
                details={"field": "end_date"},
            )


class Project(BaseModel):
    """Read view of a stored project with its derived values."""

    model_config = ConfigDict(extra="forbid")

    project_id: str
    name: str
    start_date: date
    end_date: date | None = None
    is_ongoing: bool
    industry: str | None = None
    role: str | None = None
    team_size: str | None = None
    overview: str | None = None
    responsibilities: str | None = None
    achievements: str | None = None
    duration_months: int = Field(..., ge=1)
    technology_names: list[str] = Field(default_factory=list)
    process_names: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

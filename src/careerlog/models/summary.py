"""Aggregate views over the whole record store."""

from pydantic import BaseModel, ConfigDict, Field


class TechnologyExperience(BaseModel):
    """Accumulated experience with one technology across projects."""

    model_config = ConfigDict(extra="forbid")

    name: str
    experience_months: int = Field(..., ge=0)
    experience_level: int = Field(..., ge=1, le=5)


class CertificationCounts(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total: int = 0
    expiring: int = 0
    expired: int = 0


class DashboardSummary(BaseModel):
    """Counts shown on the home screen."""

    model_config = ConfigDict(extra="forbid")

    project_count: int = 0
    technology_count: int = 0
    certification_count: int = 0
    expiring_certification_count: int = 0

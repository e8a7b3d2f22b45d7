"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from careerlog.db.models.project import ProjectRow
from careerlog.db.models.technology import TechnologyRow
from careerlog.db.models.process import ProcessRow
from careerlog.db.models.certification import CertificationRow
from careerlog.db.models.association import ProjectProcessRow, ProjectTechnologyRow

__all__ = [
    "ProjectRow",
    "TechnologyRow",
    "ProcessRow",
    "CertificationRow",
    "ProjectTechnologyRow",
    "ProjectProcessRow",
]

"""PMO: SQLAlchemy models."""
from pmo.core import permissions as resources
from pmo.models.contractor import Contractor
from pmo.models.document import Document, Media
from pmo.models.project import ConstructionMilestone, ConstructionProject, Project, RepairPhase, RepairProject
from pmo.models.reference import FundingSource, RepairType
from pmo.models.setting import Setting

# Resource key -> model, used by the SQL store
MODELS = {
    resources.PROJECTS: Project,
    resources.CONSTRUCTION_PROJECTS: ConstructionProject,
    resources.REPAIR_PROJECTS: RepairProject,
    resources.MILESTONES: ConstructionMilestone,
    resources.PHASES: RepairPhase,
    resources.CONTRACTORS: Contractor,
    resources.FUNDING_SOURCES: FundingSource,
    resources.REPAIR_TYPES: RepairType,
    resources.DOCUMENTS: Document,
    resources.MEDIA: Media,
    resources.SETTINGS: Setting,
}

__all__ = [
    "Project", "ConstructionProject", "RepairProject",
    "ConstructionMilestone", "RepairPhase",
    "Contractor",
    "FundingSource", "RepairType",
    "Document", "Media",
    "Setting",
    "MODELS",
]

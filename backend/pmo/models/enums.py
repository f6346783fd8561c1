"""PMO: Shared enums (stored as their string values)."""
from enum import Enum


class Campus(str, Enum):
    MAIN = "MAIN"
    BUTUAN = "BUTUAN"
    CABADBARAN = "CABADBARAN"
    SAN_FRANCISCO = "SAN_FRANCISCO"


class ProjectType(str, Enum):
    CONSTRUCTION = "CONSTRUCTION"
    REPAIR = "REPAIR"
    MAINTENANCE = "MAINTENANCE"
    RENOVATION = "RENOVATION"


class ProjectStatus(str, Enum):
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    ON_HOLD = "ON_HOLD"
    CANCELLED = "CANCELLED"


class RepairStatus(str, Enum):
    REPORTED = "REPORTED"
    INSPECTED = "INSPECTED"
    APPROVED = "APPROVED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class UrgencyLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ContractorStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    BLACKLISTED = "BLACKLISTED"


class DocumentType(str, Enum):
    CONTRACT = "CONTRACT"
    REPORT = "REPORT"
    POLICY = "POLICY"
    SPECIFICATION = "SPECIFICATION"
    PROPOSAL = "PROPOSAL"
    MINUTES = "MINUTES"
    MEMO = "MEMO"
    OTHER = "OTHER"


class MediaType(str, Enum):
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    DOCUMENT = "DOCUMENT"
    OTHER = "OTHER"


class SettingDataType(str, Enum):
    STRING = "STRING"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    JSON = "JSON"
    DATE = "DATE"
    DATETIME = "DATETIME"


class EntityType(str, Enum):
    """Owners a document or media record can be attached to."""

    PROJECT = "projects"
    CONSTRUCTION_PROJECT = "construction_projects"
    REPAIR_PROJECT = "repair_projects"
    CONTRACTOR = "contractors"


class ProgressStatus(str, Enum):
    """Status of a construction milestone or a repair phase."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    DELAYED = "DELAYED"

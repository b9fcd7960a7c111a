"""Data models for the effort estimation system."""

from .definitions import (
    DefinitionKind,
    FieldDefinition,
    ScopeDefinition,
    TechnicalComponent,
    Definition,
    DEFINITION_MODELS,
)
from .estimate import EstimateResult, TaskBreakdown
from .project import (
    ProjectComplexity,
    ComponentType,
    ComponentComplexity,
    ProjectStatus,
    FieldValue,
    ScopeSelection,
    ProjectEffortRecord,
    Project,
)
from .user import UserRole, User, SessionContext
from .form import FieldFormEntry, ProjectForm, ProjectSubmission, EffortInput
from .report import (
    RecordBreakdown,
    EffortSummary,
    SeriesPoint,
    ScopeGroup,
    ProjectReport,
)
from .error import ErrorResponse

__all__ = [
    # Definition models
    "DefinitionKind",
    "FieldDefinition",
    "ScopeDefinition",
    "TechnicalComponent",
    "Definition",
    "DEFINITION_MODELS",
    # Advisory estimate models
    "EstimateResult",
    "TaskBreakdown",
    # Project models
    "ProjectComplexity",
    "ComponentType",
    "ComponentComplexity",
    "ProjectStatus",
    "FieldValue",
    "ScopeSelection",
    "ProjectEffortRecord",
    "Project",
    # User models
    "UserRole",
    "User",
    "SessionContext",
    # Form models
    "FieldFormEntry",
    "ProjectForm",
    "ProjectSubmission",
    "EffortInput",
    # Report models
    "RecordBreakdown",
    "EffortSummary",
    "SeriesPoint",
    "ScopeGroup",
    "ProjectReport",
    # Error response
    "ErrorResponse",
]

"""Services for the effort estimation system."""

from .document_store import DocumentStore, get_document_store
from .definition_store import DefinitionStore, create_definition_store
from .auth_service import AuthService
from .project_repository import ProjectRepository
from .project_service import ProjectService, new_effort_record
from .claude_client import ClaudeClient, get_claude_client
from .advisory_estimator import AdvisoryEstimator, build_advisory_prompt, get_advisory_estimator

__all__ = [
    "DocumentStore",
    "get_document_store",
    "DefinitionStore",
    "create_definition_store",
    "AuthService",
    "ProjectRepository",
    "ProjectService",
    "new_effort_record",
    "ClaudeClient",
    "get_claude_client",
    "AdvisoryEstimator",
    "build_advisory_prompt",
    "get_advisory_estimator",
]

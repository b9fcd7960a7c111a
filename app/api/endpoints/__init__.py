"""API endpoints package."""

from . import health
from . import auth
from . import definitions
from . import projects

__all__ = ["health", "auth", "definitions", "projects"]

"""
Service layer.

Orchestrates validation, backend calls and UI feedback for authentication.
"""

from .auth_service import AuthOrchestrator, classify_failure

__all__ = [
    "AuthOrchestrator",
    "classify_failure",
]

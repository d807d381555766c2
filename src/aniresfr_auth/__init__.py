"""
Aniresfr NGO Portal Authentication Client

This package validates NGO login and registration input, submits it to the
Aniresfr identity backend and reports progress back to the calling UI.
"""

__version__ = "0.1.0"
__author__ = "Aniresfr"
__description__ = "Login and registration client for the Aniresfr NGO portal"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "AuthOrchestrator":
        from .services import AuthOrchestrator
        return AuthOrchestrator
    if name == "AniresfrAPI":
        from .api import AniresfrAPI
        return AniresfrAPI
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "AuthOrchestrator",
    "AniresfrAPI",
]

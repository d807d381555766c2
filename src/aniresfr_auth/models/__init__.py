"""
Data models for the NGO portal authentication client.

Contains DTOs for credentials, registration profiles, button state and
authentication outcomes.
"""

from .auth import Credentials, RegistrationProfile
from .outcome import ButtonState, FailureKind, AuthSuccess, AuthFailure, AuthOutcome

__all__ = [
    "Credentials",
    "RegistrationProfile",
    "ButtonState",
    "FailureKind",
    "AuthSuccess",
    "AuthFailure",
    "AuthOutcome",
]

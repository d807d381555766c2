"""
Outcome data models.

Button states reported to the UI and the tagged result of one
authentication attempt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ButtonState(str, Enum):
    """State of the submit button while an attempt is in progress."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (ButtonState.SUCCESS, ButtonState.ERROR)


class FailureKind(str, Enum):
    """Where a failed attempt was stopped."""

    VALIDATION = "validation"
    SERVER_REPORTED = "server_reported"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class AuthSuccess:
    """The backend issued a session token."""

    token: str

    @property
    def ok(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "AuthSuccess(token='***')"


@dataclass(frozen=True)
class AuthFailure:
    """The attempt ended without a token."""

    message: str
    kind: FailureKind = FailureKind.UNCLASSIFIED

    @property
    def ok(self) -> bool:
        return False


AuthOutcome = Union[AuthSuccess, AuthFailure]

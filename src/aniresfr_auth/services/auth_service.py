"""
Authentication orchestration service.

Validates form input, submits it to the backend and reports progress to the
UI through two callbacks: one for the error message and one for the submit
button state. On success the session token is persisted and the client is
sent to the portal home page.
"""

import logging
from typing import Any, Callable, Optional

import requests  # type: ignore

from ..core import constants
from ..models import (
    AuthFailure,
    AuthOutcome,
    AuthSuccess,
    ButtonState,
    Credentials,
    FailureKind,
    RegistrationProfile,
)
from ..session import Navigator, SessionStore
from ..validators import is_valid_email, is_valid_phone_number

ErrorSink = Callable[[str], None]
ButtonStateSink = Callable[[ButtonState], None]
Predicate = Callable[[Any], bool]


def _strip(value: Any) -> Any:
    """Trim surrounding whitespace so the checked value is the one sent."""
    return value.strip() if isinstance(value, str) else value


def classify_failure(error: Exception, fallback_message: str) -> AuthFailure:
    """
    Turn a failed request into the message shown to the user.

    A response body with a non-empty string ``error`` field is passed
    through verbatim. Anything else (no response, non-JSON body, missing or
    non-string ``error``) gets ``fallback_message``.

    Args:
        error: Exception raised while submitting
        fallback_message: Operation-specific generic message

    Returns:
        Classified failure
    """
    # A 4xx/5xx Response is falsy, so compare against None
    response = getattr(error, "response", None)
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None

        message = body.get(constants.ERROR_FIELD) if isinstance(body, dict) else None
        if isinstance(message, str) and message:
            return AuthFailure(
                message=message,
                kind=FailureKind.SERVER_REPORTED
            )

    return AuthFailure(message=fallback_message, kind=FailureKind.UNCLASSIFIED)


class AuthOrchestrator:
    """
    Drives one login or registration attempt from raw input to a terminal
    button state.

    Nothing is stored between attempts; concurrent calls are independent and
    both report to whatever sinks they were given.
    """

    def __init__(
        self,
        api_client,
        session_store: SessionStore,
        navigator: Navigator,
        token_key: str = constants.DEFAULT_TOKEN_KEY,
        email_validator: Predicate = is_valid_email,
        phone_validator: Predicate = is_valid_phone_number,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            api_client: Client exposing ``login`` and ``register_ngo``
            session_store: Where the issued token is persisted
            navigator: Used to go to the home page after success
            token_key: Storage key for the token
            email_validator: Email format predicate
            phone_validator: Phone number format predicate
            logger: Logger instance
        """
        self.api_client = api_client
        self.session_store = session_store
        self.navigator = navigator
        self.token_key = token_key
        self.email_validator = email_validator
        self.phone_validator = phone_validator
        self.logger = logger or logging.getLogger(__name__)

    def login(
        self,
        email: str,
        password: str,
        report_error: ErrorSink,
        report_button_state: ButtonStateSink
    ) -> AuthOutcome:
        """
        Log in with email and password.

        Args:
            email: Email address entered by the user
            password: Password entered by the user
            report_error: Receives the message to display ("" clears it)
            report_button_state: Receives each button state transition

        Returns:
            The outcome of the attempt
        """
        email = _strip(email)
        if not self.email_validator(email):
            return self._reject(constants.INVALID_EMAIL_MESSAGE, report_error)

        credentials = Credentials(email=email, password=password)
        return self._submit(
            "login",
            lambda: self.api_client.login(credentials),
            constants.LOGIN_FAILED_MESSAGE,
            report_error,
            report_button_state
        )

    def registration(
        self,
        org_name: str,
        phone_number: str,
        email: str,
        emergency_contact: str,
        password: str,
        location: str,
        website_link: str,
        latitude: float,
        longitude: float,
        report_error: ErrorSink,
        report_button_state: ButtonStateSink
    ) -> AuthOutcome:
        """
        Register a new NGO account.

        Email, phone number and emergency contact are trimmed, then checked
        in that order; the first invalid field stops the attempt before any
        request.

        Args:
            org_name: Organization name
            phone_number: Organization phone number
            email: Organization email address
            emergency_contact: Emergency contact phone number
            password: Account password
            location: Free-text location (not sent yet)
            website_link: Organization website
            latitude: Organization latitude
            longitude: Organization longitude
            report_error: Receives the message to display ("" clears it)
            report_button_state: Receives each button state transition

        Returns:
            The outcome of the attempt
        """
        email = _strip(email)
        phone_number = _strip(phone_number)
        emergency_contact = _strip(emergency_contact)

        if not self.email_validator(email):
            return self._reject(constants.INVALID_EMAIL_MESSAGE, report_error)

        if not self.phone_validator(phone_number):
            return self._reject(constants.INVALID_PHONE_MESSAGE, report_error)

        if not self.phone_validator(emergency_contact):
            return self._reject(constants.INVALID_EMERGENCY_CONTACT_MESSAGE, report_error)

        profile = RegistrationProfile(
            org_name=org_name,
            phone_number=phone_number,
            email=email,
            password=password,
            emergency_contact=emergency_contact,
            location=location,
            website_link=website_link,
            latitude=latitude,
            longitude=longitude
        )
        if location:
            self.logger.debug(f"Location {location!r} is not sent, address placeholder used")

        return self._submit(
            "registration",
            lambda: self.api_client.register_ngo(profile),
            constants.REGISTRATION_FAILED_MESSAGE,
            report_error,
            report_button_state
        )

    def _reject(self, message: str, report_error: ErrorSink) -> AuthFailure:
        """Report a local validation failure. Button state stays idle."""
        self.logger.info(f"Rejected before submission: {message}")
        report_error(message)
        return AuthFailure(message=message, kind=FailureKind.VALIDATION)

    def _submit(
        self,
        operation: str,
        request: Callable[[], str],
        fallback_message: str,
        report_error: ErrorSink,
        report_button_state: ButtonStateSink
    ) -> AuthOutcome:
        """
        Send the request and drive the button to a terminal state.

        Args:
            operation: Name used in log lines
            request: Performs the backend call and returns the token
            fallback_message: Message used when the server gives none
            report_error: Error message sink
            report_button_state: Button state sink

        Returns:
            The outcome of the attempt
        """
        report_error("")
        report_button_state(ButtonState.LOADING)

        try:
            token = request()
            # Persist before reporting success so a failed write ends in error
            self.session_store.set(self.token_key, token)
        except (requests.exceptions.RequestException, ValueError, OSError) as e:
            failure = classify_failure(e, fallback_message)
            self.logger.warning(f"{operation.capitalize()} failed ({failure.kind.value}): {e}")
            report_button_state(ButtonState.ERROR)
            report_error(failure.message)
            return failure

        report_button_state(ButtonState.SUCCESS)
        self.logger.info(f"{operation.capitalize()} succeeded, session stored under {self.token_key!r}")
        self.navigator.go_to(constants.HOME_PATH)
        return AuthSuccess(token=token)

"""
Application-wide constants for the NGO portal authentication client.

Endpoints, storage keys and the user-facing messages shown by the login and
registration forms.
"""

# Backend
DEFAULT_API_BASE_URL = "https://aniresfr-backend.vercel.app"
DEFAULT_API_TIMEOUT = 30  # seconds
DEFAULT_API_MAX_RETRIES = 0  # failures are surfaced once, never retried here

LOGIN_ENDPOINT = "/login/"
REGISTER_NGO_ENDPOINT = "/register/ngo"

# Session persistence
DEFAULT_TOKEN_KEY = "csrftoken"
DEFAULT_SESSION_STORE_FILE = "~/.aniresfr/session.json"

# Navigation target after a successful login or registration
HOME_PATH = "/"

# Registration payload placeholders (not yet sourced from form input)
ADDRESS_PLACEHOLDER = "temp"
ANIMALS_SUPPORTED_PLACEHOLDER: tuple = ()

# Validation messages
INVALID_EMAIL_MESSAGE = "Enter a valid email address."
INVALID_PHONE_MESSAGE = "Enter a valid phone number."
INVALID_EMERGENCY_CONTACT_MESSAGE = "Enter a valid emergency contact number."

# Generic fallbacks when the server gives no structured error
LOGIN_FAILED_MESSAGE = "An error occurred while logging in."
REGISTRATION_FAILED_MESSAGE = "An error occurred while registering."

# Field in an error response body carrying a message for the user
ERROR_FIELD = "error"

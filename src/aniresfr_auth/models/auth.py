"""
Authentication data models.

Contains DTOs for the login and NGO registration request bodies.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ..core import constants


@dataclass
class Credentials:
    """Portal login credentials."""

    email: str
    password: str

    def to_payload(self) -> Dict[str, Any]:
        """Build the login request body."""
        return {
            "email": self.email,
            "password": self.password,
        }

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass
class RegistrationProfile:
    """NGO registration form data."""

    org_name: str
    phone_number: str
    email: str
    password: str
    emergency_contact: str
    location: str
    website_link: str
    latitude: float
    longitude: float

    def to_payload(self) -> Dict[str, Any]:
        """
        Build the registration request body.

        ``location`` is not sent: the backend ``address`` field and the
        ``animals_supported`` list are still filled with placeholders.

        Returns:
            Request body using the backend's field names
        """
        return {
            "name": self.org_name,
            "phone_number": self.phone_number,
            "email": self.email,
            "password": self.password,
            "emergency_contact_number": self.emergency_contact,
            "animals_supported": list(constants.ANIMALS_SUPPORTED_PLACEHOLDER),
            "website": self.website_link,
            "address": constants.ADDRESS_PLACEHOLDER,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }

    def __repr__(self) -> str:
        return (
            f"RegistrationProfile(org_name={self.org_name!r}, email={self.email!r}, "
            f"password='***', location={self.location!r})"
        )

import logging
from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)


class PersonalInfoDraft(BaseModel):
    """Holds personal details such as name and contact information.

    Attributes:
        first_name (str): Given name, required.
        last_name (str): Family name, required.
        address (str | None): Postal address.
        email (str | None): Contact email.
        phone (str | None): Contact phone number.
        profession (str | None): Professional headline.
        date_of_birth (date | None): Date of birth.
        photo (str | None): Photo location.

    """

    first_name: str
    last_name: str
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    profession: str | None = None
    date_of_birth: date | None = None
    photo: str | None = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def validate_name(cls, v, info):
        """Validate the name fields.

        Args:
            v: The value to validate. Must be a non-empty string.
            info: Validation info carrying the field name.

        Returns:
            str: The validated value (stripped of leading/trailing whitespace).

        Raises:
            ValueError: If the value is not a string or is empty after stripping whitespace.

        """
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        if not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v.strip()

    @field_validator("address", "email", "phone", "profession", "photo", mode="before")
    @classmethod
    def validate_optional_text(cls, v, info):
        """Validate the optional text fields.

        Args:
            v: The value to validate. Must be a non-empty string or None.
            info: Validation info carrying the field name.

        Returns:
            str | None: The validated value (stripped of leading/trailing whitespace).

        Notes:
            1. None is accepted as is.
            2. Ensure the value is a string that is not empty after stripping whitespace.

        """
        if v is None:
            return v
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string or None")
        if not v.strip():
            raise ValueError(f"{info.field_name} must not be empty")
        return v.strip()


class PersonalInfoRead(PersonalInfoDraft):
    """Snapshot of a persisted personal info row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    resume_id: int

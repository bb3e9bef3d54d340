import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)


class RatedDraft(BaseModel):
    """
    A described item with an optional level, used for languages and additional skills.

    Attributes:
        description (str): What is being rated, stripped and non-empty.
        level (str | None): Free-form level, for example "fluent".

    """

    description: str
    level: str | None = None

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        """Validate the description field; it must be a non-empty string."""
        if not isinstance(v, str):
            raise ValueError("description must be a string")
        if not v.strip():
            raise ValueError("description must not be empty")
        return v.strip()

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v):
        if v is None:
            return v
        if not isinstance(v, str):
            raise ValueError("level must be a string or None")
        return v.strip() or None


class RatedRead(RatedDraft):
    """Snapshot of a persisted language or additional skill row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    resume_id: int

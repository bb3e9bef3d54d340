import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)


class ExperienceDraft(BaseModel):
    """
    Represents one work experience entry.

    Attributes:
        position (str): The job title held.
        company_name (str | None): The employer.
        from_date (str | None): Start date, as entered.
        to_date (str | None): End date, or None if still ongoing.
        achievements (list[str]): Non-empty, stripped achievement strings.

    """

    position: str
    company_name: str | None = None
    from_date: str | None = None
    to_date: str | None = None
    achievements: list[str] = []

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v):
        """Validate the position field.

        Args:
            v: The position value to validate. Must be a non-empty string.

        Returns:
            str: The validated position (stripped of leading/trailing whitespace).

        """
        if not isinstance(v, str):
            raise ValueError("position must be a string")
        if not v.strip():
            raise ValueError("position must not be empty")
        return v.strip()

    @field_validator("achievements", mode="before")
    @classmethod
    def validate_achievements(cls, v):
        """
        Validate the achievements field.

        Args:
            v: The achievements value to validate. Must be a list of strings or None.

        Returns:
            list[str]: The cleaned achievements list.

        Notes:
            1. None is treated as an empty list.
            2. Strip whitespace from each achievement and filter out empty strings.

        """
        if v is None:
            return []
        if not isinstance(v, list):
            raise ValueError("achievements must be a list")
        cleaned = []
        for item in v:
            if not isinstance(item, str):
                raise ValueError("achievements must be a list of strings")
            if item.strip():
                cleaned.append(item.strip())
        return cleaned


class ExperienceRead(ExperienceDraft):
    """Snapshot of a persisted experience row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    resume_id: int

import logging

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)


class EducationDraft(BaseModel):
    """
    Represents one education entry.

    Attributes:
        school (str): The institution attended.
        course (str | None): The course or degree followed.
        from_date (str | None): Start date, as entered.
        to_date (str | None): End date, as entered.
        achievements (list[str]): Non-empty, stripped achievement strings.

    """

    school: str
    course: str | None = None
    from_date: str | None = None
    to_date: str | None = None
    achievements: list[str] = []

    @field_validator("school", mode="before")
    @classmethod
    def validate_school(cls, v):
        """Validate the school field.

        Args:
            v: The school value to validate. Must be a non-empty string.

        Returns:
            str: The validated school (stripped of leading/trailing whitespace).

        Raises:
            ValueError: If the school is not a string or is empty after stripping whitespace.

        """
        if not isinstance(v, str):
            raise ValueError("school must be a string")
        if not v.strip():
            raise ValueError("school must not be empty")
        return v.strip()

    @field_validator("achievements", mode="before")
    @classmethod
    def validate_achievements(cls, v):
        """Validate the achievements field; None is treated as an empty list."""
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


class EducationRead(EducationDraft):
    """Snapshot of a persisted education row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    resume_id: int

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)


class SkillDraft(BaseModel):
    """
    Represents one skill.

    Attributes:
        description (str): What the skill is.
        achievements (list[str]): Achievements demonstrating the skill.
        index (int): 1-based position of the skill in its resume.

    """

    description: str
    achievements: list[str] = []
    index: int = Field(default=1, ge=1)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        """Validate the description field; it must be a non-empty string."""
        if not isinstance(v, str):
            raise ValueError("description must be a string")
        if not v.strip():
            raise ValueError("description must not be empty")
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


class SkillRead(SkillDraft):
    """Snapshot of a persisted skill row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    resume_id: int

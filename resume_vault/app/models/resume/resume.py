import logging
from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from .education import EducationRead
from .experience import ExperienceRead
from .personal import PersonalInfoRead
from .rated import RatedRead
from .skill import SkillRead

log = logging.getLogger(__name__)


class ResumeDraft(BaseModel):
    """
    Validated attributes of a resume before it is inserted.

    Attributes:
        user_id (int): The owner of the resume.
        title (str): The resume title, stripped and non-empty.
        description (str | None): Optional description.

    """

    user_id: int
    title: str
    description: str | None = None

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        """Validate the title field.

        Args:
            v: The title value to validate. Must be a non-empty string.

        Returns:
            str: The validated title (stripped of leading/trailing whitespace).

        Raises:
            ValueError: If the title is not a string or is empty after stripping whitespace.

        """
        if not isinstance(v, str):
            raise ValueError("title must be a string")
        if not v.strip():
            raise ValueError("title must not be empty")
        return v.strip()

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        """Validate the description field, which may be None."""
        if v is None:
            return v
        if not isinstance(v, str):
            raise ValueError("description must be a string or None")
        return v


class ResumeRead(ResumeDraft):
    """Snapshot of a persisted resume row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    inserted_at: datetime
    updated_at: datetime


class ResumeAggregate(ResumeRead):
    """
    A resume together with the children created alongside it.

    Nested fields are None when no child of that kind was created, never an
    empty list.

    Attributes:
        personal_info (PersonalInfoRead | None): The personal info record.
        experiences (list[ExperienceRead] | None): Experiences in input order.
        education (list[EducationRead] | None): Education entries in input order.
        skills (list[SkillRead] | None): Skills in input order.
        languages (list[RatedRead] | None): Languages in input order.
        additional_skills (list[RatedRead] | None): Additional skills in input order.

    """

    personal_info: PersonalInfoRead | None = None
    experiences: list[ExperienceRead] | None = None
    education: list[EducationRead] | None = None
    skills: list[SkillRead] | None = None
    languages: list[RatedRead] | None = None
    additional_skills: list[RatedRead] | None = None

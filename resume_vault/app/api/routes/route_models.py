import logging
from typing import Any

from pydantic import BaseModel

log = logging.getLogger(__name__)


class ResumeAggregateCreateRequest(BaseModel):
    """Request model for creating a resume with its children.

    Only `user_id` is checked here. Every other value is passed through raw
    and validated by the creation step it belongs to, so a bad value is
    reported against that step.

    Attributes:
        user_id (int): The owner of the new resume.
        title (Any): The resume title; renamed if the owner already uses it.
        description (Any): Optional description.
        personal_info (Any): Personal details, if any.
        experiences (list[Any] | None): Work experience entries in display order.
        education (list[Any] | None): Education entries in display order.
        skills (list[Any] | None): Skills in display order.
        languages (list[Any] | None): Languages with optional levels.
        additional_skills (list[Any] | None): Other skills with optional levels.

    """

    user_id: int
    title: Any = None
    description: Any = None
    personal_info: Any = None
    experiences: list[Any] | None = None
    education: list[Any] | None = None
    skills: list[Any] | None = None
    languages: list[Any] | None = None
    additional_skills: list[Any] | None = None


class StepFailureDetail(BaseModel):
    """Error detail returned when a creation step fails.

    Attributes:
        step (dict[str, Any]): Identity of the failing step (kind, name and 1-based index).
        errors (dict[str, list[str]]): Field name to error messages.

    """

    step: dict[str, Any]
    errors: dict[str, list[str]]

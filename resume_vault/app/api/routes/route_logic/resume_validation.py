import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from resume_vault.app.models.resume.education import EducationDraft
from resume_vault.app.models.resume.experience import ExperienceDraft
from resume_vault.app.models.resume.personal import PersonalInfoDraft
from resume_vault.app.models.resume.rated import RatedDraft
from resume_vault.app.models.resume.resume import ResumeDraft
from resume_vault.app.models.resume.skill import SkillDraft

log = logging.getLogger(__name__)

BASE_ERROR_KEY = "base"


class EntityType(str, Enum):
    """Tags for the entity types that make up a resume aggregate."""

    RESUME = "resume"
    PERSONAL_INFO = "personal_info"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILL = "skill"
    LANGUAGE = "language"
    ADDITIONAL_SKILL = "additional_skill"


DRAFT_MODELS: dict[EntityType, type[BaseModel]] = {
    EntityType.RESUME: ResumeDraft,
    EntityType.PERSONAL_INFO: PersonalInfoDraft,
    EntityType.EXPERIENCE: ExperienceDraft,
    EntityType.EDUCATION: EducationDraft,
    EntityType.SKILL: SkillDraft,
    EntityType.LANGUAGE: RatedDraft,
    EntityType.ADDITIONAL_SKILL: RatedDraft,
}


@dataclass(frozen=True)
class ValidDraft:
    """A successful validation carrying the typed draft."""

    entity_type: EntityType
    draft: BaseModel


@dataclass(frozen=True)
class InvalidDraft:
    """A failed validation carrying field name to messages."""

    entity_type: EntityType
    field_errors: dict[str, list[str]] = field(default_factory=dict)


def field_errors_from_validation_error(exc: ValidationError) -> dict[str, list[str]]:
    """Convert a pydantic ValidationError into a field name to messages mapping.

    Args:
        exc (ValidationError): The error raised by pydantic.

    Returns:
        dict[str, list[str]]: Messages grouped by dotted field location.

    Notes:
        1. Each error location is joined with "." to form the key.
        2. Errors without a location (for example a non-mapping input) are keyed as "base".
        3. Messages keep the order pydantic reported them in.

    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or BASE_ERROR_KEY
        errors.setdefault(key, []).append(error["msg"])
    return errors


def validate(
    entity_type: EntityType,
    attrs: Mapping[str, Any] | Any,
) -> ValidDraft | InvalidDraft:
    """Validate raw attributes against the draft model of an entity type.

    Args:
        entity_type (EntityType): The kind of entity the attributes describe.
        attrs (Mapping[str, Any] | Any): The raw attributes supplied by the caller.

    Returns:
        ValidDraft | InvalidDraft: The typed draft, or the field errors explaining why
            the attributes were rejected.

    Notes:
        1. Look up the draft model registered for the entity type.
        2. Validate the attributes with pydantic.
        3. On failure, collect the errors per field instead of raising.
        4. This function performs no database access.

    """
    model = DRAFT_MODELS[entity_type]
    try:
        draft = model.model_validate(attrs)
    except ValidationError as e:
        field_errors = field_errors_from_validation_error(e)
        _msg = f"Validation failed for {entity_type.value}: {field_errors}"
        log.debug(_msg)
        return InvalidDraft(entity_type=entity_type, field_errors=field_errors)
    return ValidDraft(entity_type=entity_type, draft=draft)

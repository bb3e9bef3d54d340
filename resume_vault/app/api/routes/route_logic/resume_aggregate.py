import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from resume_vault.app.api.routes.route_logic.resume_assembly import (
    assemble_resume_aggregate,
)
from resume_vault.app.api.routes.route_logic.resume_steps import (
    PERSONAL_INFO_STEP,
    PRIMARY_STEP,
    PlanStep,
    StepId,
    StepKind,
)
from resume_vault.app.api.routes.route_logic.resume_uniqueness import (
    resolve_unique_title,
)
from resume_vault.app.api.routes.route_logic.resume_validation import (
    BASE_ERROR_KEY,
    EntityType,
    InvalidDraft,
    validate,
)
from resume_vault.app.models.education_model import Education
from resume_vault.app.models.experience_model import Experience
from resume_vault.app.models.personal_info_model import PersonalInfo
from resume_vault.app.models.rated_model import AdditionalSkill, Language
from resume_vault.app.models.resume.education import EducationRead
from resume_vault.app.models.resume.experience import ExperienceRead
from resume_vault.app.models.resume.personal import PersonalInfoRead
from resume_vault.app.models.resume.rated import RatedRead
from resume_vault.app.models.resume.resume import ResumeAggregate, ResumeRead
from resume_vault.app.models.resume.skill import SkillRead
from resume_vault.app.models.resume_model import Resume as DatabaseResume
from resume_vault.app.models.resume_model import ResumeData
from resume_vault.app.models.skill_model import Skill

log = logging.getLogger(__name__)

# List fields of the aggregate, in the order their steps are planned.
LIST_FIELDS: tuple[tuple[str, EntityType], ...] = (
    ("experiences", EntityType.EXPERIENCE),
    ("education", EntityType.EDUCATION),
    ("skills", EntityType.SKILL),
    ("languages", EntityType.LANGUAGE),
    ("additional_skills", EntityType.ADDITIONAL_SKILL),
)

CHILD_MODELS = {
    EntityType.PERSONAL_INFO: PersonalInfo,
    EntityType.EXPERIENCE: Experience,
    EntityType.EDUCATION: Education,
    EntityType.SKILL: Skill,
    EntityType.LANGUAGE: Language,
    EntityType.ADDITIONAL_SKILL: AdditionalSkill,
}

READ_MODELS: dict[EntityType, type[BaseModel]] = {
    EntityType.RESUME: ResumeRead,
    EntityType.PERSONAL_INFO: PersonalInfoRead,
    EntityType.EXPERIENCE: ExperienceRead,
    EntityType.EDUCATION: EducationRead,
    EntityType.SKILL: SkillRead,
    EntityType.LANGUAGE: RatedRead,
    EntityType.ADDITIONAL_SKILL: RatedRead,
}


class ResumeAggregateCreateParams(BaseModel):
    """Parameters for creating a resume together with its children.

    Element values are kept raw; each one is validated by its own step so a
    failure can be attributed to it.
    """

    user_id: int
    title: Any
    description: Any = None
    personal_info: Any = None
    experiences: list[Any] | None = None
    education: list[Any] | None = None
    skills: list[Any] | None = None
    languages: list[Any] | None = None
    additional_skills: list[Any] | None = None


@dataclass(frozen=True)
class AggregateCreateSuccess:
    """Every step was committed."""

    resume: ResumeAggregate


@dataclass(frozen=True)
class AggregateCreateFailure:
    """The first failing step; nothing from the request was persisted."""

    step_id: StepId
    field_errors: dict[str, list[str]] = field(default_factory=dict)


class StepAbortedError(Exception):
    """Raised inside the transaction to abort it at a given step."""

    def __init__(self, step_id: StepId, field_errors: dict[str, list[str]]):
        super().__init__(f"Step {step_id.label} failed: {field_errors}")
        self.step_id = step_id
        self.field_errors = field_errors


def fan_out_list_steps(
    list_name: str,
    entity_type: EntityType,
    items: Sequence[Any] | None,
    parent: StepId,
) -> list[PlanStep]:
    """Produce one insert step per element of an input list.

    Args:
        list_name (str): The aggregate field the elements belong to.
        entity_type (EntityType): The entity type each element describes.
        items (Sequence[Any] | None): The raw elements in input order.
        parent (StepId): The step whose output id the elements reference.

    Returns:
        list[PlanStep]: The steps, tagged (list_name, i) with 1-based i.

    Notes:
        1. None and empty lists produce no steps.
        2. Skill elements get their `index` attribute set to their input position.

    """
    steps = []
    for position, item in enumerate(items or [], start=1):
        attrs = item
        if entity_type is EntityType.SKILL and isinstance(item, Mapping):
            attrs = {**item, "index": position}
        steps.append(
            PlanStep(
                step_id=StepId(kind=StepKind.LIST_ITEM, name=list_name, index=position),
                entity_type=entity_type,
                attrs=attrs,
                depends_on=parent,
            )
        )
    return steps


def build_step_plan(params: ResumeAggregateCreateParams) -> list[PlanStep]:
    """Build the ordered list of steps needed to create a resume aggregate.

    Args:
        params (ResumeAggregateCreateParams): The nested creation input.

    Returns:
        list[PlanStep]: The primary step, then the personal info step if supplied,
            then one step per element of each list field, in `LIST_FIELDS` order.

    Notes:
        1. The primary step has no dependency.
        2. Every child step depends on the primary step for its resume id.

    """
    plan = [
        PlanStep(
            step_id=PRIMARY_STEP,
            entity_type=EntityType.RESUME,
            attrs={
                "user_id": params.user_id,
                "title": params.title,
                "description": params.description,
            },
        )
    ]
    if params.personal_info is not None:
        plan.append(
            PlanStep(
                step_id=PERSONAL_INFO_STEP,
                entity_type=EntityType.PERSONAL_INFO,
                attrs=params.personal_info,
                depends_on=PRIMARY_STEP,
            )
        )
    for list_name, entity_type in LIST_FIELDS:
        plan.extend(
            fan_out_list_steps(
                list_name,
                entity_type,
                getattr(params, list_name),
                parent=PRIMARY_STEP,
            )
        )
    return plan


def _build_entity(entity_type: EntityType, draft: BaseModel, parent_id: int | None):
    if entity_type is EntityType.RESUME:
        return DatabaseResume(data=ResumeData(**draft.model_dump()))
    return CHILD_MODELS[entity_type](resume_id=parent_id, **draft.model_dump())


def _run_step(
    db: Session,
    step: PlanStep,
    outputs: Mapping[StepId, BaseModel],
    clock: Callable[[], float],
) -> BaseModel:
    """Validate and persist a single step.

    Args:
        db (Session): The session holding the open transaction.
        step (PlanStep): The step to run.
        outputs (Mapping[StepId, BaseModel]): Outputs of the steps already run.
        clock (Callable[[], float]): Time source for title renaming.

    Returns:
        BaseModel: A read model snapshot of the flushed entity.

    Raises:
        StepAbortedError: If validation fails or the database rejects the write.

    Notes:
        1. Validate the step's attributes.
        2. For the primary step, rename the title if the owner already uses it.
        3. Take the parent id from the output of the step named in `depends_on`.
        4. Add and flush the entity so its id is assigned, then snapshot it.

    """
    result = validate(step.entity_type, step.attrs)
    if isinstance(result, InvalidDraft):
        raise StepAbortedError(step.step_id, result.field_errors)

    parent_id = None
    if step.depends_on is not None:
        parent_id = outputs[step.depends_on].id

    try:
        draft = result.draft
        if step.step_id.kind is StepKind.PRIMARY:
            draft = resolve_unique_title(db, draft, clock=clock)
        entity = _build_entity(step.entity_type, draft, parent_id)
        db.add(entity)
        db.flush()
    except SQLAlchemyError as e:
        _msg = f"Database error while persisting step {step.step_id.label}"
        log.exception(_msg)
        raise StepAbortedError(step.step_id, {BASE_ERROR_KEY: [str(e)]}) from e

    return READ_MODELS[step.entity_type].model_validate(entity)


def create_resume_aggregate(
    db: Session,
    params: ResumeAggregateCreateParams,
    clock: Callable[[], float] = time.time,
) -> AggregateCreateSuccess | AggregateCreateFailure:
    """Create a resume and all of its children in one transaction.

    Args:
        db (Session): The database session; the transaction is committed or rolled back here.
        params (ResumeAggregateCreateParams): The nested creation input.
        clock (Callable[[], float]): Time source for title renaming.

    Returns:
        AggregateCreateSuccess | AggregateCreateFailure: The assembled resume, or the
            first failing step and its field errors.

    Notes:
        1. Build the step plan.
        2. Run the steps in plan order, stopping at the first failure.
        3. On failure, roll back so nothing from this request persists.
        4. On success, commit and assemble the step outputs into one nested resume.
        5. A failed commit is reported against the last step of the plan.
        6. This function performs database reads and writes.

    """
    plan = build_step_plan(params)
    _msg = f"create_resume_aggregate starting with {len(plan)} steps"
    log.debug(_msg)

    outputs: dict[StepId, BaseModel] = {}
    try:
        for step in plan:
            outputs[step.step_id] = _run_step(db, step, outputs, clock)
        try:
            db.commit()
        except SQLAlchemyError as e:
            _msg = "Database error while committing resume aggregate"
            log.exception(_msg)
            raise StepAbortedError(plan[-1].step_id, {BASE_ERROR_KEY: [str(e)]}) from e
    except StepAbortedError as e:
        db.rollback()
        _msg = f"Resume aggregate creation aborted at step {e.step_id.label}"
        log.warning(_msg)
        return AggregateCreateFailure(step_id=e.step_id, field_errors=e.field_errors)
    except Exception:
        db.rollback()
        raise

    resume = assemble_resume_aggregate(outputs)
    _msg = f"Created resume {resume.id} for user {resume.user_id}"
    log.info(_msg)
    return AggregateCreateSuccess(resume=resume)

import logging
from collections.abc import Mapping

from pydantic import BaseModel

from resume_vault.app.api.routes.route_logic.resume_steps import (
    PERSONAL_INFO_STEP,
    StepId,
    StepKind,
)
from resume_vault.app.models.resume.resume import ResumeAggregate

log = logging.getLogger(__name__)


def assemble_resume_aggregate(
    step_outputs: Mapping[StepId, BaseModel],
) -> ResumeAggregate:
    """Fold the outputs of a committed creation plan back into one nested resume.

    Args:
        step_outputs (Mapping[StepId, BaseModel]): Snapshot of every persisted entity,
            keyed by the step that created it.

    Returns:
        ResumeAggregate: The resume fields with its children nested beneath.

    Raises:
        ValueError: If there is no primary output, or a list step names a field the
            aggregate does not have.

    Notes:
        1. Start from the fields of the primary (resume) output.
        2. Attach the personal info output when present.
        3. Group list element outputs by their list name.
        4. Sort each group by the 1-based input index carried in its step id, so the
           order of the mapping itself never matters.
        5. Lists without entries stay absent (None) rather than empty.
        6. The input mapping is not modified and no database access is performed.

    """
    primary = [
        output
        for step_id, output in step_outputs.items()
        if step_id.kind is StepKind.PRIMARY
    ]
    if len(primary) != 1:
        raise ValueError(f"Expected exactly one primary output, found {len(primary)}")

    fields = primary[0].model_dump()

    personal_info = step_outputs.get(PERSONAL_INFO_STEP)
    if personal_info is not None:
        fields["personal_info"] = personal_info

    grouped: dict[str, list[tuple[int, BaseModel]]] = {}
    for step_id, output in step_outputs.items():
        if step_id.kind is StepKind.LIST_ITEM:
            grouped.setdefault(step_id.name, []).append((step_id.index, output))

    for list_name, entries in grouped.items():
        if list_name not in ResumeAggregate.model_fields:
            raise ValueError(f"Unknown list field: {list_name}")
        fields[list_name] = [output for _, output in sorted(entries, key=lambda e: e[0])]

    return ResumeAggregate(**fields)

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from resume_vault.app.api.routes.route_logic.resume_validation import EntityType

log = logging.getLogger(__name__)


class StepKind(str, Enum):
    """The role a step plays in a resume aggregate."""

    PRIMARY = "primary"
    SINGULAR = "singular"
    LIST_ITEM = "list_item"


@dataclass(frozen=True)
class StepId:
    """Stable identity of one validate-then-persist step.

    Attributes:
        kind (StepKind): Whether the step persists the resume, its single child, or a list element.
        name (str): The aggregate field the step belongs to, e.g. "resume" or "education".
        index (int | None): 1-based position in the input list, for list elements only.

    """

    kind: StepKind
    name: str
    index: int | None = None

    @property
    def label(self) -> str:
        """Human readable form, e.g. "education[2]"."""
        if self.index is None:
            return self.name
        return f"{self.name}[{self.index}]"

    def to_dict(self) -> dict[str, Any]:
        """Plain representation used in error payloads."""
        return {"kind": self.kind.value, "name": self.name, "index": self.index}


PRIMARY_STEP = StepId(kind=StepKind.PRIMARY, name="resume")
PERSONAL_INFO_STEP = StepId(kind=StepKind.SINGULAR, name="personal_info")


@dataclass(frozen=True)
class PlanStep:
    """One entry of the ordered creation plan.

    Attributes:
        step_id (StepId): Identity of the step.
        entity_type (EntityType): Which draft model validates the attributes.
        attrs (Any): The raw attributes for the step.
        depends_on (StepId | None): The step whose output id becomes this step's parent id.

    """

    step_id: StepId
    entity_type: EntityType
    attrs: Any
    depends_on: StepId | None = None

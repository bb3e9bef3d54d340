import logging
import time
from collections.abc import Callable

from sqlalchemy.orm import Session

from resume_vault.app.api.routes.route_logic.resume_crud import (
    get_resume_by_title_and_user,
)
from resume_vault.app.models.resume.resume import ResumeDraft

log = logging.getLogger(__name__)


def suffixed_title(title: str, clock: Callable[[], float] = time.time) -> str:
    """Append the current Unix time in whole seconds to a title."""
    return f"{title}_{int(clock())}"


def resolve_unique_title(
    db: Session,
    draft: ResumeDraft,
    clock: Callable[[], float] = time.time,
) -> ResumeDraft:
    """Rename a resume draft whose title is already used by the same owner.

    Args:
        db (Session): The database session of the ongoing transaction.
        draft (ResumeDraft): The validated resume draft about to be inserted.
        clock (Callable[[], float]): Source of the current Unix time in seconds.

    Returns:
        ResumeDraft: The draft unchanged when its title is free, otherwise a copy
            whose title is suffixed with "_<unix seconds>".

    Notes:
        1. Look up an existing resume with the same (title, user_id).
        2. If none exists, return the draft as is.
        3. Otherwise return a copy carrying the suffixed title; the input draft is not mutated.
        4. The lookup and the following insert are not atomic against a concurrent
           writer, and no storage constraint backs the check. Two simultaneous
           creations with the same title can both keep it.
        5. This function performs a single database query.

    """
    existing = get_resume_by_title_and_user(
        db,
        title=draft.title,
        user_id=draft.user_id,
    )
    if existing is None:
        return draft

    new_title = suffixed_title(draft.title, clock=clock)
    _msg = (
        f"Resume title '{draft.title}' already used by user {draft.user_id}, "
        f"renaming to '{new_title}'"
    )
    log.warning(_msg)
    return draft.model_copy(update={"title": new_title})

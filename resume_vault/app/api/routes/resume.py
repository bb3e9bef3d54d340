import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from resume_vault.app.api.routes.route_logic.resume_aggregate import (
    AggregateCreateFailure,
    ResumeAggregateCreateParams,
    create_resume_aggregate,
)
from resume_vault.app.api.routes.route_models import (
    ResumeAggregateCreateRequest,
    StepFailureDetail,
)
from resume_vault.app.database.database import get_db
from resume_vault.app.models.resume.resume import ResumeAggregate

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resumes", tags=["resumes"])


@router.post(
    "/aggregate",
    response_model=ResumeAggregate,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_resume_aggregate_endpoint(
    request: ResumeAggregateCreateRequest,
    db: Session = Depends(get_db),
):
    """
    Create a resume together with its personal info and list children.

    Args:
        request (ResumeAggregateCreateRequest): The nested resume to create.
        db (Session): The database session dependency.

    Returns:
        ResumeAggregate: The created resume with its children in input order.

    Raises:
        HTTPException: 422 naming the failing step and its field errors when any part is invalid.

    Notes:
        1. Converts the request into creation parameters.
        2. Runs the aggregate creation in a single transaction.
        3. On failure, nothing is persisted and the failing step is reported.
        4. Nested fields for which nothing was created are omitted from the response.

    """
    result = create_resume_aggregate(
        db=db,
        params=ResumeAggregateCreateParams(**request.model_dump()),
    )
    if isinstance(result, AggregateCreateFailure):
        detail = StepFailureDetail(
            step=result.step_id.to_dict(),
            errors=result.field_errors,
        )
        raise HTTPException(
            status_code=422,
            detail=detail.model_dump(),
        )
    return result.resume

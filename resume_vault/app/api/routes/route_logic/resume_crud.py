import logging

from sqlalchemy.orm import Session

from resume_vault.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


def get_resume_by_title_and_user(
    db: Session,
    title: str,
    user_id: int,
) -> DatabaseResume | None:
    """Retrieve a resume by its title for a given owner.

    Args:
        db (Session): The SQLAlchemy database session used to query the database.
        title (str): The exact title to look for.
        user_id (int): The unique identifier for the user who owns the resume.

    Returns:
        DatabaseResume | None: The first matching resume, or None if there is none.

    Notes:
        1. Query the DatabaseResume table for a record matching both title and user_id.
        2. The query runs in the caller's transaction, so rows flushed earlier in it are visible.
        3. This function performs a single database query.

    """
    return (
        db.query(DatabaseResume)
        .filter(
            DatabaseResume.title == title,
            DatabaseResume.user_id == user_id,
        )
        .first()
    )

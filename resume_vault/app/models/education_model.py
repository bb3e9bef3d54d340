import logging

from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class Education(Base):
    """
    An education entry of a resume.

    Attributes:
        id (int): Primary key.
        resume_id (int): Foreign key to the owning resume.
        school (str): Name of the institution.
        course (str | None): Course or degree followed.
        from_date (str | None): Start date, as entered.
        to_date (str | None): End date, as entered.
        achievements (list[str] | None): Notable achievements.
        resume (Resume): Relationship to the owning resume.

    """

    __tablename__ = "education"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    school = Column(String, nullable=False)
    course = Column(String, nullable=True)
    from_date = Column(String, nullable=True)
    to_date = Column(String, nullable=True)
    achievements = Column(JSONB().with_variant(JSON, "sqlite"), nullable=True)

    resume = relationship("Resume", back_populates="education")

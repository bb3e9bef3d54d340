import logging

from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class Experience(Base):
    """
    A work experience entry of a resume.

    Attributes:
        id (int): Primary key.
        resume_id (int): Foreign key to the owning resume.
        position (str): Job title held.
        company_name (str | None): Employer name.
        from_date (str | None): Start of the engagement, as entered.
        to_date (str | None): End of the engagement, or None if ongoing.
        achievements (list[str] | None): Notable achievements.
        resume (Resume): Relationship to the owning resume.

    """

    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(String, nullable=False)
    company_name = Column(String, nullable=True)
    from_date = Column(String, nullable=True)
    to_date = Column(String, nullable=True)
    achievements = Column(JSONB().with_variant(JSON, "sqlite"), nullable=True)

    resume = relationship("Resume", back_populates="experiences")

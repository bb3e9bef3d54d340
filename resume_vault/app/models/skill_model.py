import logging

from sqlalchemy import JSON, Column, ForeignKey, Integer, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class Skill(Base):
    """
    A skill listed on a resume.

    Attributes:
        id (int): Primary key.
        resume_id (int): Foreign key to the owning resume.
        description (str): What the skill is.
        achievements (list[str] | None): Achievements demonstrating the skill.
        index (int): 1-based display position of the skill within its resume.
        resume (Resume): Relationship to the owning resume.

    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False)
    achievements = Column(JSONB().with_variant(JSON, "sqlite"), nullable=True)
    index = Column(Integer, nullable=False, default=1, server_default="1")

    resume = relationship("Resume", back_populates="skills")

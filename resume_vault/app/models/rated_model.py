import logging

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from resume_vault.app.models import Base

log = logging.getLogger(__name__)


class Language(Base):
    """
    A language spoken by the resume owner, with an optional proficiency level.

    Attributes:
        id (int): Primary key.
        resume_id (int): Foreign key to the owning resume.
        description (str): The language.
        level (str | None): Free-form proficiency, for example "native".
        resume (Resume): Relationship to the owning resume.

    """

    __tablename__ = "languages"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False)
    level = Column(String, nullable=True)

    resume = relationship("Resume", back_populates="languages")


class AdditionalSkill(Base):
    """A skill outside the main skills list, rated the same way as a language."""

    __tablename__ = "additional_skills"

    id = Column(Integer, primary_key=True, index=True)
    resume_id = Column(
        Integer,
        ForeignKey("resumes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    description = Column(Text, nullable=False)
    level = Column(String, nullable=True)

    resume = relationship("Resume", back_populates="additional_skills")

# app/infrastructure/models.py
"""
SQLAlchemy ORM models for students and their discussion groups.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.domain import grouping as domain
from app.infrastructure.db.session import Base


def now():
    return datetime.now(timezone.utc)


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True)
    university = Column(String(200), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    primary_interest = Column(String(200), nullable=False)
    secondary_interest = Column(String(200), nullable=False)
    created_at = Column(DateTime, default=now)

    # Relationships
    group_memberships = relationship("StudyGroupMember", back_populates="student")

    def to_domain(self) -> domain.Student:
        return domain.Student(
            name=self.name,
            primary_interest=self.primary_interest,
            secondary_interest=self.secondary_interest,
            student_id=self.id,
        )


class StudyGroup(Base):
    __tablename__ = "study_groups"

    id = Column(Integer, primary_key=True)
    university = Column(String(200), nullable=False, index=True)
    interest = Column(String(200), nullable=False)
    created_at = Column(DateTime, default=now)

    # Relationships
    members = relationship(
        "StudyGroupMember",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="StudyGroupMember.position",
    )


class StudyGroupMember(Base):
    __tablename__ = "study_group_members"

    id = Column(Integer, primary_key=True)
    group_id = Column(Integer, ForeignKey("study_groups.id"), index=True)
    student_id = Column(Integer, ForeignKey("students.id"), index=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    group = relationship("StudyGroup", back_populates="members")
    student = relationship("Student", back_populates="group_memberships")

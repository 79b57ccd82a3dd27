"""SQLAlchemy database models."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from legal_case_service.models.case import CaseStatus

Base = declarative_base()


class CaseDB(Base):
    """SQLAlchemy model for legal_case table."""

    __tablename__ = "legal_case"

    id = Column(Integer, primary_key=True, autoincrement=True)
    case_number = Column(String(20), nullable=False, unique=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)

    status = Column(
        Enum(CaseStatus),
        nullable=False,
        default=CaseStatus.NEW,
        index=True,
    )

    created_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class UserDB(Base):
    """SQLAlchemy model for user table."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)

    roles = relationship(
        "UserRoleDB",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class UserRoleDB(Base):
    """One role name held by a user."""

    __tablename__ = "user_roles"

    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), primary_key=True)
    role = Column(String(50), primary_key=True)

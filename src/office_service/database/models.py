from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import declarative_base, relationship

from ..core.constants import (
    EMAIL_MAX_LENGTH,
    OFFICE_ADDRESS_MAX_LENGTH,
    OFFICE_NAME_MAX_LENGTH,
    PERSON_NAME_MAX_LENGTH,
    ROLE_DESCRIPTION_MAX_LENGTH,
    ROLE_NAME_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
)

Base = declarative_base()

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id"), primary_key=True),
)


class RoleRecord(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(ROLE_NAME_MAX_LENGTH), unique=True, nullable=False)
    description = Column(String(ROLE_DESCRIPTION_MAX_LENGTH))


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False)
    email = Column(String(EMAIL_MAX_LENGTH), unique=True, nullable=False)
    name = Column(String(PERSON_NAME_MAX_LENGTH))
    last_name = Column(String(PERSON_NAME_MAX_LENGTH))

    # Many-to-many; link rows are removed together with the user.
    roles = relationship(RoleRecord, secondary=user_roles, lazy="selectin")


class OfficeRecord(Base):
    __tablename__ = "offices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(OFFICE_NAME_MAX_LENGTH), unique=True, nullable=False)
    address = Column(String(OFFICE_ADDRESS_MAX_LENGTH))

"""Database models for the owner records.

This module defines SQLAlchemy ORM models used by the application.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    Boolean,
    ForeignKey,
)
from sqlalchemy.orm import relationship

from .database import Base


class Owner(Base):
    """
    SQLAlchemy model representing a client of the practice.

    An owner can have multiple pets. Removing an owner does not touch
    its pets: their ``owner_id`` is neither cascaded nor nulled, and the
    column carries no foreign key constraint that would block the delete.
    """

    __tablename__ = "owners"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False, index=True)
    last_name = Column(String(100), nullable=False, index=True)
    street = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(2), nullable=True)
    zip = Column(String(5), nullable=True)
    phone = Column(String(10), nullable=False)
    email = Column(String(255), nullable=False)
    active = Column(Boolean, default=True, nullable=True)

    #: Pets owned by this owner
    pets = relationship(
        "Pet",
        back_populates="owner",
        primaryjoin="Owner.id == Pet.owner_id",
        foreign_keys="Pet.owner_id",
        passive_deletes="all",
    )

    #: Visits of all the owner's pets
    visits = relationship(
        "Visit",
        secondary="pets",
        primaryjoin="Owner.id == Pet.owner_id",
        secondaryjoin="Pet.id == Visit.pet_id",
        foreign_keys="[Pet.owner_id, Pet.id]",
        viewonly=True,
    )

    def name(self) -> str:
        """Return the owner's name as ``"Last, First"``."""
        return self.last_name + ", " + self.first_name

    def proper_name(self) -> str:
        """Return the owner's name as ``"First Last"``."""
        return self.first_name + " " + self.last_name

    def __repr__(self) -> str:
        return f"<Owner id={self.id} {self.last_name!r}, {self.first_name!r}>"


class Pet(Base):
    """SQLAlchemy model representing a pet belonging to an owner."""

    __tablename__ = "pets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    #: Identifier of the owning owner; no database constraint, so pets
    #: outlive a deleted owner
    owner_id = Column(Integer, nullable=True, index=True)

    owner = relationship(
        "Owner",
        back_populates="pets",
        primaryjoin="Owner.id == Pet.owner_id",
        foreign_keys=[owner_id],
    )
    visits = relationship("Visit", back_populates="pet")


class Visit(Base):
    """SQLAlchemy model representing a single visit of a pet."""

    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=False)
    pet_id = Column(Integer, ForeignKey("pets.id"), nullable=False)

    pet = relationship("Pet", back_populates="visits")

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Table, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .session import Base

# Many-to-many link between vets and their specialties
vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Integer, ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "specialty_id",
        Integer,
        ForeignKey("specialties.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Owner(Base):
    """Pet owner registered at the clinic"""

    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    city: Mapped[str] = mapped_column(String(80), nullable=False, default="")
    telephone: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    created_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )

    pets: Mapped[List["Pet"]] = relationship(
        "Pet", back_populates="owner", order_by="Pet.name", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}', city='{self.city}')>"


class PetType(Base):
    """Kind of animal (cat, dog, ...)"""

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self):
        return f"<PetType(id={self.id}, name='{self.name}')>"


class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    type_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("types.id"), nullable=False, index=True
    )
    owner_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("owners.id"), nullable=False, index=True
    )

    # Relationships (ORM navigation)
    type: Mapped["PetType"] = relationship("PetType", foreign_keys=[type_id])
    owner: Mapped["Owner"] = relationship("Owner", back_populates="pets")
    visits: Mapped[List["Visit"]] = relationship(
        "Visit", back_populates="pet", order_by="Visit.visit_date", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Pet(id={self.id}, name='{self.name}', owner_id={self.owner_id})>"


class Visit(Base):
    """Visit of a pet, past or scheduled"""

    __tablename__ = "visits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    pet_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("pets.id"), nullable=False, index=True
    )
    visit_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    description: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    pet: Mapped["Pet"] = relationship("Pet", back_populates="visits")

    def __repr__(self):
        return f"<Visit(id={self.id}, pet_id={self.pet_id}, visit_date={self.visit_date})>"


class Specialty(Base):
    __tablename__ = "specialties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self):
        return f"<Specialty(id={self.id}, name='{self.name}')>"


class Vet(Base):
    """Veterinarian with zero or more specialties"""

    __tablename__ = "vets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    specialties: Mapped[List["Specialty"]] = relationship(
        "Specialty", secondary=vet_specialties, order_by="Specialty.name"
    )

    def __repr__(self):
        return f"<Vet(id={self.id}, name='{self.first_name} {self.last_name}')>"

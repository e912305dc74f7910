"""
db.models - SQLAlchemy ORM declarations.

Tables
------
clients          - one row per client.  ``code`` is the generated
                   AAANNN identifier and carries the UNIQUE constraint
                   that makes concurrent code generation safe.
contacts         - people, independent of any client.
client_contacts  - many-to-many link between the two.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, DateTime, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class Client(Base):
    __tablename__ = "clients"

    id   = Column(String(36), primary_key=True)                  # uuid4
    name = Column(String(200), nullable=False, index=True)
    code = Column(String(6), nullable=False, unique=True, index=True)   # ACM001

    created_at = Column(DateTime, default=_utcnow)

    links = relationship(
        "ClientContact", back_populates="client",
        cascade="all, delete-orphan", lazy="selectin",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "total_contacts": len(self.links),
        }


class Contact(Base):
    __tablename__ = "contacts"

    id      = Column(String(36), primary_key=True)
    name    = Column(String(200), nullable=False, index=True)
    surname = Column(String(200), nullable=False, index=True)
    email   = Column(String(500), nullable=False)

    created_at = Column(DateTime, default=_utcnow)

    links = relationship(
        "ClientContact", back_populates="contact",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
        }


class ClientContact(Base):
    __tablename__ = "client_contacts"

    id         = Column(String(36), primary_key=True)
    client_id  = Column(String(36),
                        ForeignKey("clients.id", ondelete="CASCADE"),
                        nullable=False, index=True)
    contact_id = Column(String(36),
                        ForeignKey("contacts.id", ondelete="CASCADE"),
                        nullable=False, index=True)

    client  = relationship("Client", back_populates="links")
    contact = relationship("Contact", back_populates="links")

    __table_args__ = (
        UniqueConstraint("client_id", "contact_id", name="uq_client_contact"),
    )

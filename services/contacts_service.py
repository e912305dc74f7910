"""
services.contacts_service - Contact records and their client links.
"""

from __future__ import annotations

import re
import uuid
from typing import Optional

from sqlalchemy.orm import Session

import config
from db.models import Client, ClientContact, Contact
from services.clients_service import ClientsService, validate_id_list

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_contact(name: str, surname: str, email: str) -> Optional[str]:
    """Return an error message if any field is invalid, else None."""
    for label, val in [("name", name), ("surname", surname)]:
        if not val:
            return f"{label} is empty"
        if len(val) > config.NAME_MAX_LENGTH:
            return f"{label} exceeds {config.NAME_MAX_LENGTH} characters"
    if not email:
        return "email is empty"
    if len(email) > config.EMAIL_MAX_LENGTH:
        return f"email exceeds {config.EMAIL_MAX_LENGTH} characters"
    if not EMAIL_RE.match(email):
        return f"email is not a valid address: {email!r}"
    return None


class ContactsService:

    @staticmethod
    def create(session: Session, data: dict) -> Contact:
        """Create a Contact from {name, surname, email, client_ids?}."""
        name = str(data.get("name") or "").strip()
        surname = str(data.get("surname") or "").strip()
        email = str(data.get("email") or "").strip()
        err = validate_contact(name, surname, email)
        if err:
            raise ValueError(err)

        contact = Contact(id=str(uuid.uuid4()), name=name,
                          surname=surname, email=email)
        session.add(contact)
        session.flush()

        client_ids = data.get("client_ids") or []
        if client_ids:
            ContactsService.link_to_clients(session, contact, client_ids)
        return contact

    @staticmethod
    def get(session: Session, contact_id: str) -> Contact | None:
        return session.get(Contact, contact_id)

    @staticmethod
    def list_all(session: Session) -> list[Contact]:
        return session.query(Contact).order_by(
            Contact.name, Contact.surname,
        ).all()

    @staticmethod
    def list_for_client(session: Session, client_id: str) -> list[Contact]:
        return (
            session.query(Contact)
            .join(ClientContact, ClientContact.contact_id == Contact.id)
            .filter(ClientContact.client_id == client_id)
            .order_by(Contact.name, Contact.surname)
            .all()
        )

    @staticmethod
    def link_to_clients(session: Session, contact: Contact,
                        client_ids: list) -> int:
        """
        Link *contact* to every client in *client_ids*.
        Already-linked clients are skipped.  Returns the number of new links.
        """
        err = validate_id_list(client_ids, "client_ids")
        if err:
            raise ValueError(err)

        created = 0
        for client_id in client_ids:
            client = session.get(Client, client_id)
            if client is None:
                raise ValueError(f"unknown client id {client_id!r}")
            _link, is_new = ClientsService.link_contact(session, client, contact)
            created += is_new
        return created

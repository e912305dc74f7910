"""
services.clients_service - Client records and their generated codes.

All session management is the caller's responsibility (open before,
close/commit after).  This keeps the service testable and allows
the caller to batch multiple operations in one transaction.
"""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

import config
from codes import CodeGenerator, CodeLookup, parse_code
from db.models import Client, ClientContact, Contact
from services.code_lookup import SqlCodeLookup

logger = logging.getLogger(__name__)


class ClientCodeConflict(RuntimeError):
    """Every generated code collided with one inserted concurrently."""


def is_write_conflict(exc: Exception) -> bool:
    """
    True for a UNIQUE violation, or for SQLite refusing a write because
    another connection committed after this transaction started reading.
    """
    if isinstance(exc, IntegrityError):
        return True
    return (isinstance(exc, OperationalError)
            and "database is locked" in str(exc.orig))


def validate_client_name(name: str) -> Optional[str]:
    """Return an error message if *name* is too long, else None."""
    if len(name) > config.NAME_MAX_LENGTH:
        return f"name exceeds {config.NAME_MAX_LENGTH} characters"
    return None


def validate_id_list(ids, label: str) -> Optional[str]:
    if not isinstance(ids, list) or not all(isinstance(i, str) and i for i in ids):
        return f"{label} must be a list of ids"
    return None


class ClientsService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, data: dict,
               lookup: CodeLookup | None = None,
               retries: int | None = None) -> Client:
        """
        Create a Client from {name, contact_ids?}.  The code is generated.

        If another writer took the same code first, the insert fails, the
        session's transaction is rolled back and a fresh code is generated
        from a new read.  A savepoint would keep the old snapshot, so this
        must be the first write of the caller's unit of work.
        """
        name = str(data.get("name") or "")
        err = validate_client_name(name)
        if err:
            raise ValueError(err)
        contact_ids = data.get("contact_ids") or []
        err = validate_id_list(contact_ids, "contact_ids")
        if err:
            raise ValueError(err)

        generator = CodeGenerator(lookup or SqlCodeLookup(session))
        attempts = retries if retries is not None else config.CODE_CREATE_RETRIES

        client = None
        last_error = None
        for attempt in range(1, attempts + 1):
            code = generator.generate(name)
            candidate = Client(id=str(uuid.uuid4()), name=name.strip(), code=code)
            session.add(candidate)
            try:
                session.flush()
            except (IntegrityError, OperationalError) as exc:
                if not is_write_conflict(exc):
                    raise
                session.rollback()
                last_error = exc
                logger.warning("Client code %s already taken (attempt %d/%d)",
                               code, attempt, attempts)
                continue
            client = candidate
            break

        if client is None:
            raise ClientCodeConflict(
                f"could not allocate a unique client code for {name!r} "
                f"after {attempts} attempts"
            ) from last_error

        for contact_id in contact_ids:
            contact = session.get(Contact, contact_id)
            if contact is None:
                raise ValueError(f"unknown contact id {contact_id!r}")
            ClientsService.link_contact(session, client, contact)

        return client

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, client_id: str) -> Client | None:
        return session.get(Client, client_id)

    @staticmethod
    def get_by_code(session: Session, code: str) -> Client | None:
        parsed = parse_code(code)
        if parsed is None:
            return None
        return session.query(Client).filter(
            Client.code == code.strip().upper(),
        ).one_or_none()

    @staticmethod
    def list_all(session: Session) -> list[Client]:
        return session.query(Client).order_by(Client.name, Client.code).all()

    # ── Links ──────────────────────────────────────────────────────────

    @staticmethod
    def link_contact(session: Session, client: Client,
                     contact: Contact) -> tuple[ClientContact, bool]:
        """Link *contact* to *client*.  Returns (link, created)."""
        link = session.query(ClientContact).filter(
            ClientContact.client_id == client.id,
            ClientContact.contact_id == contact.id,
        ).one_or_none()
        if link is not None:
            return link, False

        link = ClientContact(id=str(uuid.uuid4()), client=client, contact=contact)
        session.add(link)
        session.flush()
        return link, True

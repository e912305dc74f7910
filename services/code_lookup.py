"""
services.code_lookup - Database-backed CodeLookup.

Answers the generator's single question from the clients table
using the caller's session, so the read joins whatever transaction
the creation workflow already has open.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from db.models import Client


class SqlCodeLookup:

    def __init__(self, session: Session):
        self.session = session

    def find_codes_with_prefix(self, prefix: str) -> set[str]:
        # LIKE is case-insensitive on SQLite; re-check in Python.
        rows = self.session.query(Client.code).filter(
            Client.code.startswith(prefix, autoescape=True),
        ).all()
        return {code for (code,) in rows if code.startswith(prefix)}

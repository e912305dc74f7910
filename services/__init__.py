"""
services - Business-logic layer sitting between API and DB.
"""

from services.code_lookup import SqlCodeLookup                               # noqa: F401
from services.clients_service import ClientsService, ClientCodeConflict     # noqa: F401
from services.contacts_service import ContactsService                       # noqa: F401

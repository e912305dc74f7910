import uuid

import factory
from factory.alchemy import SQLAlchemyModelFactory

from db.models import Client, Contact


class ClientFactory(SQLAlchemyModelFactory):
    """Factory for creating Client rows with an explicit code."""

    class Meta:
        model = Client
        sqlalchemy_session_persistence = "flush"

    id = factory.LazyFunction(lambda: str(uuid.uuid4()))
    name = factory.Faker("company")
    code = factory.Sequence(lambda n: f"ZZZ{n % 999 + 1:03d}")


class ContactFactory(SQLAlchemyModelFactory):
    """Factory for creating Contact rows."""

    class Meta:
        model = Contact
        sqlalchemy_session_persistence = "flush"

    id = factory.LazyFunction(lambda: str(uuid.uuid4()))
    name = factory.Faker("first_name")
    surname = factory.Faker("last_name")
    email = factory.Faker("email")


def bind(session):
    """Point every factory at *session*."""
    for f in (ClientFactory, ContactFactory):
        f._meta.sqlalchemy_session = session

import pytest

from db import init_db, get_session
from tests import factories


@pytest.fixture
def db_url(tmp_path):
    """A fresh SQLite file per test."""
    return f"sqlite:///{tmp_path / 'clientcore.sqlite'}"


@pytest.fixture
def session(db_url):
    """Session on an initialised database, with factories bound to it."""
    init_db(db_url)
    s = get_session()
    factories.bind(s)
    yield s
    s.close()


@pytest.fixture
def app(db_url):
    """Flask app on its own fresh database."""
    from main import create_app

    app = create_app(db_url)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()

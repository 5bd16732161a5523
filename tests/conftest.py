import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from circulation import create_app
from circulation.config import TestingConfig


@pytest.fixture(autouse=True)
def reset_store_between_tests():
    from circulation.models.store import Store
    Store.reset_instance()
    yield
    Store.reset_instance()


@pytest.fixture
def store(monkeypatch):
    """
    Provide a fresh in-memory store and patch common._store() to return it,
    so service calls without an explicit `store=` hit the same object.
    """
    from circulation.models.store import Store
    from circulation.services import common as common_mod

    st = Store()
    monkeypatch.setattr(common_mod, "_store", lambda: st, raising=True)
    yield st


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app


@pytest.fixture
def runner(app):
    return app.test_cli_runner()

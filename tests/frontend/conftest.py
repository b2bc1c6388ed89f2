"""Dobles en memoria para probar el frontend sin servidor."""
import itertools

import pytest

from frontend.login.auth_state import AuthGate
from frontend.login.token_store import MemoryTokenStore
from frontend.utils.api_client import AuthFailure


class FakeAuthApi:
    def __init__(self, role="admin", verify_error=None, login_error=None):
        self.role = role
        self.verify_error = verify_error
        self.login_error = login_error
        self.calls = []

    def login(self, email, password):
        self.calls.append("login")
        if self.login_error:
            raise self.login_error
        return {"token": "tok-1", "user": {"email": email, "role": self.role}}

    def verify(self):
        self.calls.append("verify")
        if self.verify_error:
            raise self.verify_error
        return {"user": {"email": "admin@portfolio.dev", "role": self.role}}


class FakeCollectionApi:
    """Imita SkillsApi/ProjectsApi/ContactApi: el servidor asigna ids."""

    def __init__(self, items=None, prefix="id"):
        self.items = [dict(i) for i in items or []]
        self.prefix = prefix
        self.calls = []
        self.fail_with = None
        self.on_call = None
        self._ids = itertools.count(1)

    def _enter(self, op):
        self.calls.append(op)
        if self.on_call:
            self.on_call(op)
        if self.fail_with:
            raise self.fail_with

    def get_all(self):
        self._enter("get_all")
        return [dict(i) for i in self.items]

    def create(self, data):
        self._enter("create")
        item = {**data, "id": f"{self.prefix}{next(self._ids)}",
                "created_at": "2025-01-01T00:00:00"}
        self.items.append(item)
        return dict(item)

    def update(self, item_id, data):
        self._enter("update")
        for i, it in enumerate(self.items):
            if it["id"] == item_id:
                self.items[i] = {**it, **data}
                return dict(self.items[i])
        raise AuthFailure("not found", 404)

    def delete(self, item_id):
        self._enter("delete")
        self.items = [i for i in self.items if i["id"] != item_id]
        return {"message": "deleted", "id": item_id}


class FakeAboutApi:
    def __init__(self, about=None):
        self.about = dict(about or {"id": "about1", "bio": "Hello", "interests": ["Go"]})
        self.fail_with = None
        self.calls = []

    def get(self):
        self.calls.append("get")
        if self.fail_with:
            raise self.fail_with
        return dict(self.about)

    def update(self, data):
        self.calls.append("update")
        if self.fail_with:
            raise self.fail_with
        self.about = {**self.about, **data}
        return dict(self.about)


def make_gate(role=None, **kwargs):
    """``role=None`` -> anónimo; si no, sesión iniciada con ese rol."""
    gate = AuthGate(MemoryTokenStore(), FakeAuthApi(role=role or "admin", **kwargs))
    gate.initialize()
    if role:
        ok, err = gate.login("admin@portfolio.dev", "pw")
        assert ok, err
    return gate


@pytest.fixture
def admin_gate():
    return make_gate("admin")


@pytest.fixture
def anon_gate():
    return make_gate()


@pytest.fixture
def gate_factory():
    return make_gate


@pytest.fixture
def collection_api():
    return FakeCollectionApi


@pytest.fixture
def about_api():
    return FakeAboutApi()


@pytest.fixture
def auth_api_factory():
    return FakeAuthApi

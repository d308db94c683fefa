"""Shared fixtures: a fresh store per test and a client bound to it."""

import os

# Keep tests independent of any local .env
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from blog.app import create_app
from blog.core.auth_service import AuthService
from blog.core.db import DataStore
from blog.core.security import get_password_hash


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def auth_service(store):
    return AuthService(store, secret_key="unit-test-secret")


@pytest.fixture
def make_user(store):
    """Create a user directly in the store with a hashed password."""
    def _make_user(user_name, password="secret"):
        return store.create_user(user_name, f"{user_name}@test.com", get_password_hash(password))
    return _make_user


@pytest.fixture
def client(store):
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register through the API and return (user dict, auth headers)."""
    def _register(user_name, password="pwd123"):
        res = client.post("/api/auth/register", json={"user_name": user_name, "password": password})
        assert res.status_code == 200, res.text
        body = res.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}
    return _register

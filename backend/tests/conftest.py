"""Shared fixtures for record and API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from dogratings.records import Dog, Person
from dogratings.services.store import InMemoryStore
from dogratings.validators import UsGeography, ValidationContext


@pytest.fixture()
def store() -> InMemoryStore:
    """Empty record store."""
    return InMemoryStore()


@pytest.fixture()
def context(store: InMemoryStore) -> ValidationContext:
    """Validation context over the test store and the US geography table."""
    return ValidationContext(store=store, geography=UsGeography())


@pytest.fixture()
def owner(context: ValidationContext) -> Person:
    """A saved person who can own dogs and judge ratings."""
    person = Person(name="Ned")
    assert person.save(context)
    return person


@pytest.fixture()
def saved_dog(context: ValidationContext, owner: Person) -> Dog:
    """A saved, valid dog."""
    dog = Dog(name="Fido", license="OR-1234567", owner_id=owner.id)
    assert dog.save(context)
    return dog


@pytest.fixture()
def client():
    """TestClient for the app (lifespan hooks executed, fresh store per test)."""
    from dogratings.main import app

    with TestClient(app) as c:
        yield c

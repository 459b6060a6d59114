from datetime import datetime
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.cart import CardioTarget, CartEntry, SetsTarget
from app.models.exercise import BodyPart, Exercise
from app.settings import settings
from app.utils import dates
from tests.test_data import TEST_NOW


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    monkeypatch.setattr(dates, "now", lambda: TEST_NOW)
    return TEST_NOW


@pytest.fixture
def restore_settings():
    """
    Snapshot settings so a test can tweak them freely.
    """
    saved = settings.model_dump()
    yield settings
    for key, value in saved.items():
        setattr(settings, key, value)


# --------------- Item Factories ---------------


@pytest.fixture
def make_entry() -> Callable[..., CartEntry]:
    """
    Factory fixture for CartEntry values.
    Example:
        make_entry("A", BodyPart.CHEST, sets=3)
        make_entry("B", BodyPart.CARDIO, duration=20)
    """

    def _make(
        entry_id: str,
        category: BodyPart = BodyPart.CHEST,
        *,
        sets: int = 3,
        reps: int = 10,
        duration: int = 20,
        **overrides: Any,
    ) -> CartEntry:
        exercise = overrides.pop("exercise", None) or Exercise(
            id=f"ex-{entry_id}",
            name=f"Exercise {entry_id}",
            body_part=category,
        )
        target = (
            CardioTarget(duration_minutes=duration)
            if category.is_cardio
            else SetsTarget(sets=sets, reps=reps)
        )
        return CartEntry(
            id=entry_id,
            exercise=exercise,
            category=category,
            target=target,
            **overrides,
        )

    return _make


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance):
    """Plain client, real dependencies."""
    return TestClient(app_instance, raise_server_exceptions=False)

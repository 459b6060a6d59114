import pytest

from app.models.cart import CardioTarget, CartItem, SetsTarget
from app.models.exercise import BodyPart, Exercise

# ───────────── Exercise  ─────────────


@pytest.fixture
def exercise():
    """Factory fixture for Exercise instances."""

    def _make(**overrides):
        defaults = {
            "id": "ex-bench",
            "name": "平板臥推",
            "body_part": BodyPart.CHEST,
            "image_name": "平板臥推",
        }
        return Exercise(**{**defaults, **overrides})

    return _make


@pytest.fixture
def cardio_exercise(exercise):
    return exercise(id="ex-run", name="跑步機", body_part=BodyPart.CARDIO)


# ───────────── CartItem  ─────────────


@pytest.fixture
def cart_item(exercise):
    """Factory fixture for CartItem instances."""

    def _make(**overrides):
        defaults = {
            "id": "item-1",
            "exercise": exercise(),
            "target": SetsTarget(sets=3, reps=10),
        }
        return CartItem(**{**defaults, **overrides})

    return _make


@pytest.fixture
def cardio_item(cart_item, cardio_exercise):
    return cart_item(
        id="item-2",
        exercise=cardio_exercise,
        target=CardioTarget(duration_minutes=20),
    )

import pytest

from app import dependencies
from app.models.profile import NutritionProfile
from app.repositories.cart import InMemoryCartRepository
from app.repositories.errors import ProfileRepoError
from app.repositories.profile import InMemoryProfileRepository
from app.services.session import ActiveSession

# ---------------- Cart / Session --------------------


@pytest.fixture(autouse=True)
def cart_repo(app_instance):
    """
    Fresh cart for every route test so the process-wide cart stays untouched.
    """
    repo = InMemoryCartRepository()
    app_instance.dependency_overrides[dependencies.get_cart_repo] = lambda: repo
    try:
        yield repo
    finally:
        app_instance.dependency_overrides.pop(dependencies.get_cart_repo, None)


@pytest.fixture(autouse=True)
def active_session(app_instance):
    holder = ActiveSession()
    app_instance.dependency_overrides[dependencies.get_active_session] = lambda: holder
    try:
        yield holder
    finally:
        app_instance.dependency_overrides.pop(dependencies.get_active_session, None)


# ----------------------- Profile ------------------------


class BrokenProfileRepo:
    def __init__(self, *, raise_on_get: bool = False, raise_on_save: bool = False):
        self.raise_on_get = raise_on_get
        self.raise_on_save = raise_on_save
        self.saved = []

    def get(self):
        if self.raise_on_get:
            raise ProfileRepoError("boom")
        return NutritionProfile()

    def save(self, data):
        if self.raise_on_save:
            raise ProfileRepoError("boom")
        self.saved.append(data)
        return NutritionProfile(**data.model_dump())


@pytest.fixture(autouse=True)
def profile_repo(app_instance):
    repo = InMemoryProfileRepository()
    app_instance.dependency_overrides[dependencies.get_profile_repo] = lambda: repo
    try:
        yield repo
    finally:
        app_instance.dependency_overrides.pop(dependencies.get_profile_repo, None)


@pytest.fixture
def broken_profile_repo(app_instance):
    """
    Install a profile repo that raises ProfileRepoError.

    Usage:
        broken_profile_repo(raise_on_get=True)
    """

    def _install(**kwargs) -> BrokenProfileRepo:
        repo = BrokenProfileRepo(**kwargs)
        app_instance.dependency_overrides[dependencies.get_profile_repo] = lambda: repo
        return repo

    return _install


@pytest.fixture
def add_to_cart(client):
    """Add a catalog exercise through the API and return the new cart item json."""

    def _add(exercise) -> dict:
        resp = client.post("/cart/add", json={"exercise_id": exercise.id})
        assert resp.status_code == 200
        return resp.json()["item"]

    return _add

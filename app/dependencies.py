from app.repositories.cart import CartRepository, InMemoryCartRepository
from app.repositories.profile import (
    DynamoProfileRepository,
    InMemoryProfileRepository,
    ProfileRepository,
)
from app.services.session import ActiveSession
from app.settings import settings
from app.utils.log import logger

# Single-user app: one cart, one session slot, one profile per process
_cart_repo = InMemoryCartRepository()
_active_session = ActiveSession()
_profile_repo: ProfileRepository | None = None


def get_cart_repo() -> CartRepository:
    return _cart_repo


def get_active_session() -> ActiveSession:
    return _active_session


def get_profile_repo() -> ProfileRepository:  # pragma: no cover
    global _profile_repo
    if _profile_repo is None:
        logger.info(f"Using profile backend={settings.PROFILE_BACKEND}")
        if settings.uses_dynamo:
            _profile_repo = DynamoProfileRepository()
        else:
            _profile_repo = InMemoryProfileRepository()
    return _profile_repo

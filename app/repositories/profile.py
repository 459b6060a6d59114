from typing import Protocol

from app.models.profile import NutritionProfile, ProfileUpdate
from app.repositories.base import DynamoRepository
from app.repositories.errors import ProfileRepoError, RepoError
from app.utils import db
from app.utils.dates import now
from app.utils.log import logger


class ProfileRepository(Protocol):
    def get(self) -> NutritionProfile: ...
    def save(self, data: ProfileUpdate) -> NutritionProfile: ...


class InMemoryProfileRepository:
    """
    Process-local profile storage. Starts out blank.
    """

    def __init__(self, profile: NutritionProfile | None = None):
        self._profile = profile or NutritionProfile()

    def get(self) -> NutritionProfile:
        return self._profile

    def save(self, data: ProfileUpdate) -> NutritionProfile:
        self._profile = NutritionProfile(**data.model_dump(), updated_at=now())
        return self._profile


class DynamoProfileRepository(DynamoRepository[NutritionProfile]):
    """
    Stores the three profile strings in one item keyed by the local user.
    """

    def __init__(self, table=None, *, user_id: str | None = None):
        from app.settings import settings

        super().__init__(table)
        self._key = db.build_profile_key(user_id or settings.LOCAL_USER_ID)

    def _to_model(self, item: dict) -> NutritionProfile:
        data = {k: v for k, v in item.items() if k not in ("PK", "SK")}
        try:
            return NutritionProfile.model_validate(data)
        except Exception as e:
            logger.error(f"_to_model failed for profile: {e}")
            raise ProfileRepoError("Failed to create profile model from item") from e

    def get(self) -> NutritionProfile:
        try:
            item = self._safe_get(Key=self._key, ConsistentRead=True)
        except RepoError as e:
            logger.error(f"Repo error fetching profile {self._key['PK']}: {e}")
            raise ProfileRepoError("Failed to fetch profile from database") from e

        if not item:
            logger.info(f"No stored profile for {self._key['PK']}, using blank profile")
            return NutritionProfile()

        return self._to_model(item)

    def save(self, data: ProfileUpdate) -> NutritionProfile:
        profile = NutritionProfile(**data.model_dump(), updated_at=now())

        try:
            self._safe_put(profile.to_ddb_item(self._key))
        except RepoError as e:
            logger.error(f"Repo error saving profile {self._key['PK']}: {e}")
            raise ProfileRepoError("Failed to save profile") from e

        return profile

from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(find_dotenv(), override=False)


class Settings(BaseSettings):
    PROJECT_NAME: str = "fitcart"
    REGION: str = "eu-west-2"
    ENV: str = "dev"
    DDB_TABLE_NAME: str = "fitcart-dev-table"
    model_config = SettingsConfigDict(env_file=None)

    # ──────────────────── Profile storage ─────────────────────

    PROFILE_BACKEND: Literal["memory", "dynamo"] = "memory"
    LOCAL_USER_ID: str = "local"

    # ──────────────────── Cart defaults ─────────────────────

    DEFAULT_SETS: int = 3
    DEFAULT_REPS: int = 10
    DEFAULT_CARDIO_MINUTES: int = 20

    # Stepper bounds
    MAX_SETS: int = 20
    MAX_REPS: int = 100
    MAX_CARDIO_MINUTES: int = 180

    # ──────────────────── Nutrition ─────────────────────

    ACTIVITY_MIN: float = 1.2
    ACTIVITY_MAX: float = 2.0
    DEFAULT_ACTIVITY: float = 1.2
    DEFAULT_AGE_YEARS: int = 20

    # ─────────────────────────────────────────

    @property
    def uses_dynamo(self) -> bool:
        return self.PROFILE_BACKEND == "dynamo"


settings = Settings()

# Run using uv run python -m scripts.seed

from app.models.profile import ProfileUpdate
from app.repositories.profile import DynamoProfileRepository
from app.settings import settings

SAMPLE_PROFILE = ProfileUpdate(height_cm="175", weight_kg="70", gender="male")


def seed_profile(repo: DynamoProfileRepository) -> None:
    profile = repo.save(SAMPLE_PROFILE)
    print(
        f"Seeded profile for {settings.LOCAL_USER_ID}: "
        f"{profile.height_cm} cm, {profile.weight_kg} kg, {profile.gender}"
    )


def main():
    seed_profile(DynamoProfileRepository())


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print("Seeding failed:", e)
        raise

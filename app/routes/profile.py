from datetime import date as DateType
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_profile_repo
from app.models.profile import EnergyEstimate, NutritionProfile, ProfileUpdate
from app.repositories.errors import ProfileRepoError
from app.repositories.profile import ProfileRepository
from app.utils import nutrition
from app.utils.log import logger

router = APIRouter(prefix="/profile", tags=["profile"])


def _load_profile(repo: ProfileRepository) -> NutritionProfile:
    try:
        return repo.get()
    except ProfileRepoError:
        logger.exception("Error fetching nutrition profile")
        raise HTTPException(status_code=500, detail="Internal error reading profile")


@router.get("/")
def get_profile(
    repo: ProfileRepository = Depends(get_profile_repo),
) -> NutritionProfile:
    return _load_profile(repo)


@router.put("/")
def update_profile(
    form: ProfileUpdate,
    repo: ProfileRepository = Depends(get_profile_repo),
) -> NutritionProfile:
    logger.info(f"Saving nutrition profile gender={form.gender}")

    try:
        return repo.save(form)
    except ProfileRepoError:
        logger.exception("Error saving nutrition profile")
        raise HTTPException(status_code=500, detail="Internal error saving profile")


@router.get("/energy")
def get_energy(
    birthday: Annotated[DateType | None, Query()] = None,
    activity: Annotated[float | None, Query()] = None,
    repo: ProfileRepository = Depends(get_profile_repo),
) -> EnergyEstimate:
    """
    BMR/TDEE for the stored profile.

    Unparseable height or weight leaves bmr/tdee empty rather than failing;
    an activity factor outside the allowed range is reported as valid=false.
    """
    profile = _load_profile(repo)
    result = nutrition.estimate(profile, birthday=birthday, activity=activity)

    logger.debug(f"Energy estimate valid={result.valid} bmr={result.bmr}")
    return result

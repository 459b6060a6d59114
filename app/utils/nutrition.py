import math
from datetime import date

from app.models.profile import EnergyEstimate, Gender, NutritionProfile
from app.settings import settings
from app.utils import dates

# Mifflin-St Jeor constants
WEIGHT_FACTOR = 10.0
HEIGHT_FACTOR = 6.25
AGE_FACTOR = 5.0
GENDER_OFFSET: dict[str, float] = {"male": 5.0, "female": -161.0}


def parse_number(text: str) -> float | None:
    """
    Parse a form value into a float.

    Returns None for blank, non-numeric or non-finite input. Zero and
    negative numbers parse fine; range checks belong to the caller.
    """
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def age_on(birthday: date, on: date) -> int:
    return dates.whole_years_between(birthday, on)


def bmr(height_cm: str, weight_kg: str, age: int, gender: Gender) -> float | None:
    """
    Basal metabolic rate in kcal/day, or None when the inputs can't be used.
    """
    h = parse_number(height_cm)
    w = parse_number(weight_kg)
    if h is None or w is None or age <= 0:
        return None

    return WEIGHT_FACTOR * w + HEIGHT_FACTOR * h - AGE_FACTOR * age + GENDER_OFFSET[gender]


def tdee(bmr_value: float | None, activity: float) -> float | None:
    """
    Total daily energy expenditure: BMR scaled by the activity factor.
    """
    if bmr_value is None:
        return None
    return bmr_value * activity


def validate_inputs(height_cm: str, weight_kg: str, age: int, activity: float) -> bool:
    h = parse_number(height_cm)
    w = parse_number(weight_kg)
    return (
        h is not None
        and h > 0
        and w is not None
        and w > 0
        and age > 0
        and settings.ACTIVITY_MIN <= activity <= settings.ACTIVITY_MAX
    )


def default_birthday(on: date | None = None) -> date:
    return dates.years_before(on or dates.today(), settings.DEFAULT_AGE_YEARS)


def estimate(
    profile: NutritionProfile,
    *,
    birthday: date | None = None,
    activity: float | None = None,
    on: date | None = None,
) -> EnergyEstimate:
    on = on or dates.today()
    birthday = birthday or default_birthday(on)
    activity = settings.DEFAULT_ACTIVITY if activity is None else activity

    age = age_on(birthday, on)
    bmr_value = bmr(profile.height_cm, profile.weight_kg, age, profile.gender)

    return EnergyEstimate(
        age=age,
        activity=activity,
        bmr=bmr_value,
        tdee=tdee(bmr_value, activity),
        valid=validate_inputs(profile.height_cm, profile.weight_kg, age, activity),
    )

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, StringConstraints, computed_field, field_validator

from app.utils.dates import dt_to_iso

Gender = Literal["male", "female"]
GENDER_LABELS: dict[str, str] = {"male": "男性", "female": "女性"}

# Raw text as typed into the form; parsed later by the calculator
NumericText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=20)]


class NutritionProfile(BaseModel):
    height_cm: NumericText = ""
    weight_kg: NumericText = ""
    gender: Gender = "male"

    updated_at: datetime | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def fallback_gender(cls, v):
        # Unknown stored values read back as male
        if v not in GENDER_LABELS:
            return "male"
        return v

    @property
    def gender_label(self) -> str:
        return GENDER_LABELS[self.gender]

    def to_ddb_item(self, key: dict) -> dict:
        data = self.model_dump(exclude={"updated_at"})
        if self.updated_at is not None:
            data["updated_at"] = dt_to_iso(self.updated_at)
        return {**key, **data}


class ProfileUpdate(BaseModel):
    height_cm: NumericText = ""
    weight_kg: NumericText = ""
    gender: Gender = "male"


class EnergyEstimate(BaseModel):
    age: int
    activity: float
    bmr: float | None = None
    tdee: float | None = None
    valid: bool

    @computed_field  # type: ignore[prop-decorator]
    @property
    def bmr_display(self) -> str:
        return format_kcal(self.bmr)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tdee_display(self) -> str:
        return format_kcal(self.tdee)


def format_kcal(value: float | None) -> str:
    if value is None:
        return "--"
    return f"{value:.0f} kcal"

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]


class BodyPart(str, Enum):
    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    ABS = "abs"
    CARDIO = "cardio"

    @property
    def label(self) -> str:
        return BODY_PART_LABELS[self]

    @property
    def is_cardio(self) -> bool:
        return self is BodyPart.CARDIO


BODY_PART_LABELS: dict[BodyPart, str] = {
    BodyPart.CHEST: "胸",
    BodyPart.BACK: "背",
    BodyPart.LEGS: "腿",
    BodyPart.SHOULDERS: "肩",
    BodyPart.ARMS: "手",
    BodyPart.ABS: "腹肌",
    BodyPart.CARDIO: "有氧",
}


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: NameStr
    body_part: BodyPart
    image_name: Optional[str] = None


class BodyPartOut(BaseModel):
    value: BodyPart
    label: str

    @classmethod
    def from_body_part(cls, part: BodyPart) -> "BodyPartOut":
        return cls(value=part, label=part.label)


class ExerciseOut(BaseModel):
    exercise: Exercise
    in_cart: bool

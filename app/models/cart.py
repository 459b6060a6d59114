from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.exercise import BodyPart, Exercise


class SetsTarget(BaseModel):
    """Set/rep target for every body part except cardio."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sets"] = "sets"
    sets: int = Field(ge=0)
    reps: int = Field(ge=0)


class CardioTarget(BaseModel):
    """Duration target, cardio only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["cardio"] = "cardio"
    duration_minutes: int = Field(ge=0)


Target = Annotated[Union[SetsTarget, CardioTarget], Field(discriminator="kind")]


def _check_target_matches(category: BodyPart, target: SetsTarget | CardioTarget):
    if category.is_cardio != isinstance(target, CardioTarget):
        raise ValueError(
            f"Target kind '{target.kind}' does not match category '{category.value}'"
        )


class CartEntry(BaseModel):
    """
    A by-value copy of a cart row, as seen by a workout session.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    exercise: Exercise
    category: BodyPart
    target: Target

    @model_validator(mode="after")
    def validate_target_kind(self) -> "CartEntry":
        _check_target_matches(self.category, self.target)
        return self

    @property
    def is_cardio(self) -> bool:
        return self.category.is_cardio

    @property
    def target_sets(self) -> int:
        if isinstance(self.target, SetsTarget):
            return self.target.sets
        return 0

    @property
    def target_reps(self) -> int:
        if isinstance(self.target, SetsTarget):
            return self.target.reps
        return 0

    @property
    def duration_minutes(self) -> int:
        if isinstance(self.target, CardioTarget):
            return self.target.duration_minutes
        return 0


class CartItem(BaseModel):
    """
    One row of the live cart. Mutated in place by the cart repository.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    exercise: Exercise
    target: Target
    is_completed: bool = False

    @model_validator(mode="after")
    def validate_target_kind(self) -> "CartItem":
        _check_target_matches(self.exercise.body_part, self.target)
        return self

    @property
    def category(self) -> BodyPart:
        return self.exercise.body_part

    def to_entry(self) -> CartEntry:
        return CartEntry(
            id=self.id,
            exercise=self.exercise,
            category=self.category,
            target=self.target,
        )


class CartAdd(BaseModel):
    exercise_id: str = Field(min_length=1)


class CartAddResult(BaseModel):
    added: bool
    item: CartItem | None = None


class CartItemUpdate(BaseModel):
    sets: int | None = None
    reps: int | None = None
    duration_minutes: int | None = None

    @model_validator(mode="after")
    def validate_not_empty(self) -> "CartItemUpdate":
        if self.sets is None and self.reps is None and self.duration_minutes is None:
            raise ValueError("Nothing to update")
        if self.duration_minutes is not None and (
            self.sets is not None or self.reps is not None
        ):
            raise ValueError("Duration cannot be combined with sets or reps")
        return self


class CartMove(BaseModel):
    index: int

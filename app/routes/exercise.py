from fastapi import APIRouter, Depends

from app.dependencies import get_cart_repo
from app.models.exercise import BodyPart, BodyPartOut, ExerciseOut
from app.repositories.cart import CartRepository
from app.utils import catalog
from app.utils.log import logger

router = APIRouter(prefix="/exercise", tags=["exercise"])


@router.get("/body-parts")
def get_body_parts() -> list[BodyPartOut]:
    return [BodyPartOut.from_body_part(part) for part in catalog.body_parts()]


@router.get("/{body_part}")
def get_exercises(
    body_part: BodyPart,
    cart: CartRepository = Depends(get_cart_repo),
) -> list[ExerciseOut]:
    """List the catalog exercises for a body part, flagging those already in the cart."""
    logger.debug(f"Listing exercises for body_part={body_part.value}")

    return [
        ExerciseOut(exercise=ex, in_cart=cart.contains_exercise(ex.id))
        for ex in catalog.exercises_for(body_part)
    ]

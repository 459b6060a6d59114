from .cart import CardioTarget, CartEntry, CartItem, SetsTarget
from .exercise import BodyPart, Exercise
from .profile import EnergyEstimate, NutritionProfile
from .session import SessionStatus, SessionView

__all__ = [
    "BodyPart",
    "Exercise",
    "SetsTarget",
    "CardioTarget",
    "CartEntry",
    "CartItem",
    "NutritionProfile",
    "EnergyEstimate",
    "SessionStatus",
    "SessionView",
]

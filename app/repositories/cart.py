import uuid
from typing import List, Protocol

from app.models.cart import CardioTarget, CartEntry, CartItem, SetsTarget
from app.models.exercise import Exercise
from app.repositories.errors import CartItemNotFoundError, CartRepoError
from app.settings import settings
from app.utils.log import logger


class CartRepository(Protocol):
    def list_items(self) -> List[CartItem]: ...
    def add(self, exercise: Exercise) -> CartItem | None: ...
    def clear(self) -> None: ...
    def remove(self, item_id: str) -> None: ...
    def toggle_completed(self, item_id: str) -> CartItem: ...
    def update_sets(self, item_id: str, sets: int) -> CartItem: ...
    def update_reps(self, item_id: str, reps: int) -> CartItem: ...
    def update_duration(self, item_id: str, minutes: int) -> CartItem: ...
    def move(self, item_id: str, new_index: int) -> List[CartItem]: ...
    def contains_exercise(self, exercise_id: str) -> bool: ...
    def snapshot(self) -> tuple[CartEntry, ...]: ...


def _clamp(value: int, upper: int) -> int:
    return min(max(0, value), upper)


def default_target(exercise: Exercise) -> SetsTarget | CardioTarget:
    if exercise.body_part.is_cardio:
        return CardioTarget(duration_minutes=settings.DEFAULT_CARDIO_MINUTES)
    return SetsTarget(sets=settings.DEFAULT_SETS, reps=settings.DEFAULT_REPS)


class InMemoryCartRepository:
    """
    The live workout cart (the "WorkoutManager").

    Order is insertion order unless changed with move(). A workout session
    never sees this list directly, only the tuple returned by snapshot().
    """

    def __init__(self, items: list[CartItem] | None = None):
        self._items: list[CartItem] = list(items or [])

    def _index_of(self, item_id: str) -> int:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        logger.warning(f"Cart item not found item_id={item_id}")
        raise CartItemNotFoundError(f"Cart item {item_id} not found")

    def _get(self, item_id: str) -> CartItem:
        return self._items[self._index_of(item_id)]

    def list_items(self) -> List[CartItem]:
        return list(self._items)

    def contains_exercise(self, exercise_id: str) -> bool:
        return any(item.exercise.id == exercise_id for item in self._items)

    def add(self, exercise: Exercise) -> CartItem | None:
        """
        Append the exercise with default targets.
        Returns None if the exercise is already in the cart.
        """
        if self.contains_exercise(exercise.id):
            logger.debug(f"Exercise {exercise.id} already in cart, skipping")
            return None

        item = CartItem(
            id=str(uuid.uuid4()),
            exercise=exercise,
            target=default_target(exercise),
        )
        self._items.append(item)
        logger.info(f"Added {exercise.name} to cart item_id={item.id}")
        return item

    def clear(self) -> None:
        logger.info(f"Clearing cart ({len(self._items)} items)")
        self._items.clear()

    def remove(self, item_id: str) -> None:
        del self._items[self._index_of(item_id)]

    def toggle_completed(self, item_id: str) -> CartItem:
        item = self._get(item_id)
        item.is_completed = not item.is_completed
        return item

    def _sets_target(self, item: CartItem) -> SetsTarget:
        if not isinstance(item.target, SetsTarget):
            raise CartRepoError(f"Cart item {item.id} is cardio and has no sets/reps")
        return item.target

    def update_sets(self, item_id: str, sets: int) -> CartItem:
        item = self._get(item_id)
        target = self._sets_target(item)
        item.target = SetsTarget(sets=_clamp(sets, settings.MAX_SETS), reps=target.reps)
        return item

    def update_reps(self, item_id: str, reps: int) -> CartItem:
        item = self._get(item_id)
        target = self._sets_target(item)
        item.target = SetsTarget(sets=target.sets, reps=_clamp(reps, settings.MAX_REPS))
        return item

    def update_duration(self, item_id: str, minutes: int) -> CartItem:
        item = self._get(item_id)
        if not isinstance(item.target, CardioTarget):
            raise CartRepoError(f"Cart item {item_id} is not cardio")
        item.target = CardioTarget(
            duration_minutes=_clamp(minutes, settings.MAX_CARDIO_MINUTES)
        )
        return item

    def move(self, item_id: str, new_index: int) -> List[CartItem]:
        item = self._items.pop(self._index_of(item_id))
        new_index = min(max(0, new_index), len(self._items))
        self._items.insert(new_index, item)
        logger.debug(f"Moved cart item {item_id} to index {new_index}")
        return self.list_items()

    def snapshot(self) -> tuple[CartEntry, ...]:
        return tuple(item.to_entry() for item in self._items)

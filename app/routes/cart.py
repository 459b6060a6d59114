from fastapi import APIRouter, Depends, HTTPException, Response

from app.dependencies import get_cart_repo
from app.models.cart import CartAdd, CartAddResult, CartItem, CartItemUpdate, CartMove
from app.repositories.cart import CartRepository
from app.repositories.errors import CartItemNotFoundError, CartRepoError
from app.utils import catalog
from app.utils.log import logger

router = APIRouter(prefix="/cart", tags=["cart"])


# ---------------------- List / clear ---------------------------


@router.get("/")
def get_cart(repo: CartRepository = Depends(get_cart_repo)) -> list[CartItem]:
    return repo.list_items()


@router.delete("/")
def clear_cart(repo: CartRepository = Depends(get_cart_repo)):
    repo.clear()
    return Response(status_code=204)


# ---------------------- Add / remove ---------------------------


@router.post("/add")
def add_to_cart(
    form: CartAdd,
    repo: CartRepository = Depends(get_cart_repo),
) -> CartAddResult:
    exercise = catalog.get_exercise(form.exercise_id)
    if exercise is None:
        logger.warning(f"Unknown exercise_id={form.exercise_id}")
        raise HTTPException(status_code=404, detail="Exercise not found")

    item = repo.add(exercise)
    return CartAddResult(added=item is not None, item=item)


@router.delete("/{item_id}")
def remove_from_cart(item_id: str, repo: CartRepository = Depends(get_cart_repo)):
    try:
        repo.remove(item_id)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")

    return Response(status_code=204)


# ---------------------- Edit ---------------------------


@router.post("/{item_id}/toggle")
def toggle_completed(
    item_id: str, repo: CartRepository = Depends(get_cart_repo)
) -> CartItem:
    try:
        return repo.toggle_completed(item_id)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")


@router.patch("/{item_id}")
def update_item(
    item_id: str,
    form: CartItemUpdate,
    repo: CartRepository = Depends(get_cart_repo),
) -> CartItem:
    """Apply stepper changes. Values are clamped to the stepper bounds."""
    try:
        if form.duration_minutes is not None:
            return repo.update_duration(item_id, form.duration_minutes)

        item = None
        if form.sets is not None:
            item = repo.update_sets(item_id, form.sets)
        if form.reps is not None:
            item = repo.update_reps(item_id, form.reps)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")
    except CartRepoError as e:
        logger.warning(f"Rejected update for cart item {item_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return item


@router.post("/{item_id}/move")
def move_item(
    item_id: str,
    form: CartMove,
    repo: CartRepository = Depends(get_cart_repo),
) -> list[CartItem]:
    try:
        return repo.move(item_id, form.index)
    except CartItemNotFoundError:
        raise HTTPException(status_code=404, detail="Cart item not found")

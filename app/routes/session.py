from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_active_session, get_cart_repo
from app.models.session import SessionActionResult, SessionEvent, SessionView
from app.repositories.cart import CartRepository
from app.services.session import (
    ActiveSession,
    EmptySessionError,
    NoActiveSessionError,
    SessionAlreadyActiveError,
    SessionController,
)
from app.utils.log import logger

router = APIRouter(prefix="/session", tags=["session"])


def _require_controller(active: ActiveSession) -> SessionController:
    try:
        return active.get()
    except NoActiveSessionError:
        raise HTTPException(status_code=404, detail="No workout session in progress")


def _run_action(
    controller: SessionController, action: Callable[[SessionController], bool]
) -> SessionActionResult:
    """
    Apply one user action and report which terminal event (if any) it caused.
    """
    events: list[SessionEvent] = []
    unsubscribers = [
        controller.subscribe("completed", lambda c: events.append("completed")),
        controller.subscribe("cancelled", lambda c: events.append("cancelled")),
    ]

    try:
        applied = action(controller)
    finally:
        for unsubscribe in unsubscribers:
            unsubscribe()

    return SessionActionResult(
        applied=applied,
        event=events[0] if events else None,
        session=controller.to_view(),
    )


# ---------------------- Start ---------------------------


@router.post("/start", status_code=201)
def start_session(
    cart: CartRepository = Depends(get_cart_repo),
    active: ActiveSession = Depends(get_active_session),
) -> SessionView:
    try:
        controller = active.begin(cart.snapshot())
    except SessionAlreadyActiveError:
        raise HTTPException(status_code=409, detail="A workout session is already running")
    except EmptySessionError:
        raise HTTPException(status_code=400, detail="Cart is empty")

    return controller.to_view()


@router.get("/")
def get_session(active: ActiveSession = Depends(get_active_session)) -> SessionView:
    return _require_controller(active).to_view()


# ---------------------- Progress ---------------------------


@router.post("/complete-set")
def complete_set(
    active: ActiveSession = Depends(get_active_session),
) -> SessionActionResult:
    controller = _require_controller(active)
    return _run_action(controller, SessionController.complete_one_set)


@router.post("/complete-cardio")
def complete_cardio(
    active: ActiveSession = Depends(get_active_session),
) -> SessionActionResult:
    controller = _require_controller(active)
    return _run_action(controller, SessionController.complete_cardio_entry)


@router.post("/complete")
def complete_current(
    active: ActiveSession = Depends(get_active_session),
) -> SessionActionResult:
    """The single primary action: picks set or cardio completion for the current entry."""
    controller = _require_controller(active)
    entry = controller.current_entry()

    if entry is not None and entry.is_cardio:
        return _run_action(controller, SessionController.complete_cardio_entry)
    return _run_action(controller, SessionController.complete_one_set)


@router.post("/entries/{entry_id}/satisfy")
def satisfy_entry(
    entry_id: str,
    active: ActiveSession = Depends(get_active_session),
) -> SessionActionResult:
    controller = _require_controller(active)
    result = _run_action(controller, lambda c: c.mark_satisfied(entry_id))
    if not result.applied:
        logger.warning(f"Entry {entry_id} not part of the current session")
        raise HTTPException(status_code=404, detail="Entry not in session")
    return result


# ---------------------- Cancel ---------------------------


@router.post("/cancel")
def cancel_session(
    active: ActiveSession = Depends(get_active_session),
) -> SessionActionResult:
    controller = _require_controller(active)
    return _run_action(controller, SessionController.cancel)

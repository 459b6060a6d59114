from enum import Enum
from typing import Literal

from pydantic import BaseModel

from app.models.cart import CartEntry


class SessionStatus(str, Enum):
    ACTIVE = "active"
    FINISHED = "finished"
    CANCELLED = "cancelled"


SessionEvent = Literal["changed", "completed", "cancelled"]


class EntryProgress(BaseModel):
    entry_id: str
    name: str
    is_cardio: bool
    completed_sets: int
    target_sets: int
    duration_minutes: int = 0
    duration_display: str = ""
    satisfied: bool


class SessionView(BaseModel):
    status: SessionStatus
    cursor: int
    total: int
    satisfied: int
    current: CartEntry | None = None
    up_next: CartEntry | None = None
    entries: list[EntryProgress]
    is_finished: bool


class SessionActionResult(BaseModel):
    applied: bool
    event: SessionEvent | None = None
    session: SessionView

from typing import Callable, Sequence

from app.models.cart import CartEntry
from app.models.session import (
    EntryProgress,
    SessionEvent,
    SessionStatus,
    SessionView,
)
from app.utils.dates import format_minutes
from app.utils.log import logger

Listener = Callable[["SessionController"], None]

EVENTS: tuple[SessionEvent, ...] = ("changed", "completed", "cancelled")


class SessionError(Exception):
    """Base class for guided-session errors."""

    pass


class SessionAlreadyActiveError(SessionError):
    pass


class NoActiveSessionError(SessionError):
    pass


class EmptySessionError(SessionError):
    """Raised when a session is requested for an empty cart."""

    pass


class SessionController:
    """
    Walks a fixed snapshot of cart entries in order.

    Non-cardio entries are satisfied once their completed set count reaches
    the target; cardio entries are satisfied by a one-shot mark. The cursor
    only moves forward and skips entries that are already satisfied.

    Operations that don't apply to the current entry are ignored and return
    False. Listeners are notified after every change; "completed" and
    "cancelled" fire at most once and are mutually exclusive.
    """

    def __init__(self, snapshot: Sequence[CartEntry]):
        self._snapshot: tuple[CartEntry, ...] = tuple(snapshot)

        ids = [entry.id for entry in self._snapshot]
        if len(ids) != len(set(ids)):
            raise ValueError("Session entries must have unique ids")

        self._cursor = 0
        self._completed_sets: dict[str, int] = {
            entry.id: 0 for entry in self._snapshot if not entry.is_cardio
        }
        self._completed_cardio: set[str] = set()
        self._status = SessionStatus.ACTIVE
        self._listeners: dict[SessionEvent, list[Listener]] = {e: [] for e in EVENTS}

        # Leading zero-set entries are already satisfied; a snapshot made only of
        # them finishes here and reports "completed" to its first subscriber.
        self._completion_pending = self._advance()

    @classmethod
    def start(cls, snapshot: Sequence[CartEntry]) -> "SessionController":
        controller = cls(snapshot)
        logger.info(f"Session started with {len(controller._snapshot)} entries")
        return controller

    # ---------------------- Subscriptions ---------------------------

    def subscribe(self, event: SessionEvent, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that removes it again."""
        if event not in self._listeners:
            raise ValueError(f"Unknown session event: {event}")
        if event == "completed" and self._completion_pending:
            self._completion_pending = False
            self._deliver(event, listener)
            self._release()
            return lambda: None

        self._listeners[event].append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return _unsubscribe

    def _deliver(self, event: SessionEvent, listener: Listener) -> None:
        try:
            listener(self)
        except Exception:
            logger.exception(f"Session listener failed for event={event}")

    def _notify(self, event: SessionEvent) -> None:
        for listener in list(self._listeners[event]):
            self._deliver(event, listener)

    # ---------------------- Queries ---------------------------

    @property
    def snapshot(self) -> tuple[CartEntry, ...]:
        return self._snapshot

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status is SessionStatus.ACTIVE

    @property
    def is_finished(self) -> bool:
        return self._status is SessionStatus.FINISHED

    @property
    def is_cancelled(self) -> bool:
        return self._status is SessionStatus.CANCELLED

    def completed_sets(self, entry_id: str) -> int:
        return self._completed_sets.get(entry_id, 0)

    def _is_satisfied(self, entry: CartEntry) -> bool:
        if entry.is_cardio:
            return entry.id in self._completed_cardio
        return self._completed_sets[entry.id] >= entry.target_sets

    def is_satisfied(self, entry_id: str) -> bool:
        entry = self._find(entry_id)
        return entry is not None and self._is_satisfied(entry)

    def _find(self, entry_id: str) -> CartEntry | None:
        for entry in self._snapshot:
            if entry.id == entry_id:
                return entry
        return None

    def current_entry(self) -> CartEntry | None:
        if self.is_cancelled or self._cursor >= len(self._snapshot):
            return None
        return self._snapshot[self._cursor]

    def peek_next(self) -> CartEntry | None:
        if self.is_cancelled:
            return None
        for entry in self._snapshot[self._cursor + 1 :]:
            if not self._is_satisfied(entry):
                return entry
        return None

    def progress(self) -> tuple[int, int]:
        done = sum(1 for entry in self._snapshot if self._is_satisfied(entry))
        return done, len(self._snapshot)

    # ---------------------- Operations ---------------------------

    def complete_one_set(self) -> bool:
        entry = self.current_entry() if self.is_active else None
        if entry is None or entry.is_cardio:
            logger.debug("complete_one_set ignored: no current non-cardio entry")
            return False

        done = min(self._completed_sets[entry.id] + 1, entry.target_sets)
        self._completed_sets[entry.id] = done
        logger.debug(f"Entry {entry.id}: {done}/{entry.target_sets} sets")

        self._after_change()
        return True

    def complete_cardio_entry(self) -> bool:
        entry = self.current_entry() if self.is_active else None
        if entry is None or not entry.is_cardio:
            logger.debug("complete_cardio_entry ignored: no current cardio entry")
            return False

        self._completed_cardio.add(entry.id)
        logger.debug(f"Cardio entry {entry.id} marked complete")

        self._after_change()
        return True

    def mark_satisfied(self, entry_id: str) -> bool:
        """
        Satisfy an entry out of turn. The cursor only moves if the current
        entry is satisfied; later entries are skipped when the cursor reaches them.
        """
        entry = self._find(entry_id) if self.is_active else None
        if entry is None:
            logger.debug(f"mark_satisfied ignored for entry_id={entry_id}")
            return False

        if entry.is_cardio:
            self._completed_cardio.add(entry.id)
        else:
            self._completed_sets[entry.id] = entry.target_sets

        self._after_change()
        return True

    def _after_change(self) -> None:
        just_finished = False
        current = self.current_entry()
        if current is not None and self._is_satisfied(current):
            just_finished = self._advance()

        self._notify("changed")
        if just_finished:
            self._notify("completed")
            self._release()

    def _advance(self) -> bool:
        """
        Move past satisfied entries. Returns True on the transition to finished.
        """
        if not self.is_active:
            return False

        start = self._cursor
        while self._cursor < len(self._snapshot) and self._is_satisfied(
            self._snapshot[self._cursor]
        ):
            self._cursor += 1

        if self._cursor != start:
            logger.debug(f"Cursor advanced {start} -> {self._cursor}")

        if self._cursor < len(self._snapshot):
            return False

        if self._snapshot and all(self._is_satisfied(e) for e in self._snapshot):
            self._status = SessionStatus.FINISHED
            logger.info("Session complete")
            return True
        return False

    def cancel(self) -> bool:
        if not self.is_active:
            return False

        self._status = SessionStatus.CANCELLED
        logger.info(f"Session cancelled at cursor={self._cursor}")
        self._notify("cancelled")
        self._release()
        return True

    def _release(self) -> None:
        for listeners in self._listeners.values():
            listeners.clear()

    # ---------------------- Presentation ---------------------------

    def to_view(self) -> SessionView:
        done, total = self.progress()
        return SessionView(
            status=self._status,
            cursor=self._cursor,
            total=total,
            satisfied=done,
            current=self.current_entry(),
            up_next=self.peek_next(),
            entries=[
                EntryProgress(
                    entry_id=entry.id,
                    name=entry.exercise.name,
                    is_cardio=entry.is_cardio,
                    completed_sets=self.completed_sets(entry.id),
                    target_sets=entry.target_sets,
                    duration_minutes=entry.duration_minutes,
                    duration_display=format_minutes(entry.duration_minutes)
                    if entry.is_cardio
                    else "",
                    satisfied=self._is_satisfied(entry),
                )
                for entry in self._snapshot
            ],
            is_finished=self.is_finished,
        )


class ActiveSession:
    """
    Holds the single in-progress session of this single-user app.
    Cleared automatically when the session completes or is cancelled.
    """

    def __init__(self):
        self._controller: SessionController | None = None

    @property
    def has_active(self) -> bool:
        return self._controller is not None

    def begin(self, entries: Sequence[CartEntry]) -> SessionController:
        if self._controller is not None:
            raise SessionAlreadyActiveError("A workout session is already running")
        if not entries:
            raise EmptySessionError("Cannot start a session with an empty cart")

        controller = SessionController.start(entries)
        controller.subscribe("completed", self._on_terminated)
        controller.subscribe("cancelled", self._on_terminated)
        if controller.is_active:
            self._controller = controller
        return controller

    def _on_terminated(self, controller: SessionController) -> None:
        if self._controller is controller:
            logger.debug(f"Tearing down session status={controller.status.value}")
            self._controller = None

    def get(self) -> SessionController:
        if self._controller is None:
            raise NoActiveSessionError("No workout session in progress")
        return self._controller

    def end(self) -> None:
        self._controller = None

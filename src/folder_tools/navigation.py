"""Browsing state for a folder view.

``BrowserSession`` owns which well-known folder is selected and the
loading/loaded/failed transitions of its listing. Every fetch is keyed by a
request id; a snapshot delivered for anything but the latest request is
dropped, so a slow listing of a previous folder can never replace the current
one. Observers are notified with the new ``SessionState`` on every transition.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from folder_tools.core import get_logger
from folder_tools.filesystem import WellKnownLocation, fetch_location_async
from folder_tools.schemas import AccessError, Entry, Snapshot

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    """Lifecycle of the listing shown for the selected folder."""

    idle = "idle"
    loading = "loading"
    loaded = "loaded"
    failed = "failed"


@dataclass(frozen=True)
class SessionState:
    """What the view should display.

    Attributes:
        location: Selected folder
        status: Listing lifecycle
        snapshot: Latest delivered snapshot, None while idle or loading
        request_id: Id of the request the state belongs to
    """

    location: WellKnownLocation
    status: SessionStatus
    snapshot: Optional[Snapshot] = None
    request_id: int = 0

    @property
    def entries(self) -> tuple[Entry, ...]:
        if self.status is SessionStatus.loaded and self.snapshot is not None:
            return self.snapshot.entries
        return ()

    @property
    def error(self) -> Optional[AccessError]:
        if self.status is SessionStatus.failed and self.snapshot is not None:
            return self.snapshot.error
        return None


Observer = Callable[[SessionState], None]


class BrowserSession:
    """Selection and listing state for one folder view."""

    def __init__(self, location: WellKnownLocation = WellKnownLocation.downloads):
        self._state = SessionState(location=location, status=SessionStatus.idle)
        self._last_request_id = 0
        self._observers: list[Observer] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def begin(self, location: WellKnownLocation) -> int:
        """Select a folder and mark its listing as loading.

        Returns:
            Id to pass to :meth:`deliver` with the fetched snapshot
        """
        self._last_request_id += 1
        logger.info(
            "Loading folder", location=location.value, request_id=self._last_request_id
        )
        self._publish(
            SessionState(
                location=location,
                status=SessionStatus.loading,
                request_id=self._last_request_id,
            )
        )
        return self._last_request_id

    def deliver(self, request_id: int, snapshot: Snapshot) -> bool:
        """Apply a fetched snapshot if it answers the latest request.

        Returns:
            False when the snapshot is stale and was discarded
        """
        if request_id != self._last_request_id:
            logger.info(
                "Discarding stale snapshot",
                request_id=request_id,
                latest_request_id=self._last_request_id,
            )
            return False

        status = SessionStatus.loaded if snapshot.ok else SessionStatus.failed
        self._publish(replace(self._state, status=status, snapshot=snapshot))
        return True

    async def navigate(
        self, location: Optional[WellKnownLocation] = None
    ) -> SessionState:
        """Select a folder (the current one by default) and list it."""
        target = location if location is not None else self._state.location
        request_id = self.begin(target)
        snapshot = await fetch_location_async(target)
        self.deliver(request_id, snapshot)
        return self._state

    async def refresh(self) -> SessionState:
        return await self.navigate()

    def _publish(self, state: SessionState) -> None:
        self._state = state
        for observer in list(self._observers):
            observer(state)

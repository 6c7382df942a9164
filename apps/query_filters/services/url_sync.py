"""Keep filter selections and the address bar query string in step.

Every synchronizer on a page shares one :class:`Location`, so a change on one
filter builds on the parameters written by the others.
"""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Optional

from apps.query_filters.services.filter_state import ChangeEvent, FilterStateStore
from apps.query_filters.services.url_params import (
    join_selection,
    list_region_id,
    page_parameter,
    read_selection,
    selection_target,
    split_selection,
    term_parameter,
    write_url,
)

log = logging.getLogger(__name__)

Navigate = Callable[[str], Awaitable[object]]


class Location:
    """The page's current URL.

    Only the most recently started navigation may update ``url``; one that
    finishes after a newer one started is discarded.
    """

    def __init__(self, url: str):
        self.url = url
        self._generation = 0

    def begin(self) -> int:
        self._generation += 1
        return self._generation

    def commit(self, generation: int, url: str) -> bool:
        if generation != self._generation:
            return False
        self.url = url
        return True


class UrlSynchronizer:
    """Navigate to the URL that reflects a store's selection.

    Navigation is two-phase: :func:`selection_target` computes the target from
    the shared location and ``navigate`` (awaitable, injected) performs it.

    The first :meth:`sync` after creation is the mount pass and never
    navigates. User changes go through :meth:`handle_change`, which always
    navigates.
    """

    def __init__(
        self,
        store: FilterStateStore,
        list_id: str,
        instance_id,
        navigate: Navigate,
        location: Location | str,
    ):
        self.store = store
        self.list_id = list_id
        self.instance_id = instance_id
        self.navigate = navigate
        self.location = location if isinstance(location, Location) else Location(location)
        self._pending = 0

    @classmethod
    def for_url(
        cls,
        location: Location | str,
        list_id: str,
        instance_id,
        input_type: str,
        navigate: Navigate,
    ) -> "UrlSynchronizer":
        """Build a synchronizer whose store is hydrated from the location."""

        location = location if isinstance(location, Location) else Location(location)
        store = FilterStateStore.from_url(location.url, list_id, instance_id, input_type)
        return cls(store, list_id, instance_id, navigate, location)

    @property
    def current_url(self) -> str:
        return self.location.url

    @property
    def settled(self) -> bool:
        return self._pending == 0

    def target_url(self) -> str:
        return selection_target(
            self.current_url,
            self.list_id,
            self.instance_id,
            self.store.current_selection(),
        )

    def mount(self) -> None:
        self.store.mark_hydrated()

    async def sync(self) -> Optional[str]:
        """Navigate to the current selection's URL, except on the mount pass.

        Returns the URL that was applied, or ``None`` when nothing was (mount
        pass, superseded or failed navigation).
        """

        if not self.store.has_hydrated:
            self.mount()
            return None
        return await self._navigate()

    async def handle_change(self, event: ChangeEvent) -> Optional[str]:
        self.store.handle_change(event)
        self.mount()
        return await self._navigate()

    async def _navigate(self) -> Optional[str]:
        target = self.target_url()
        generation = self.location.begin()
        self._pending += 1
        try:
            await self.navigate(target)
        except Exception:
            log.warning("Navigation to %s failed; keeping local filter state", target, exc_info=True)
            return None
        finally:
            self._pending -= 1

        if not self.location.commit(generation, target):
            log.debug("Navigation to %s superseded", target)
            return None
        return target


__all__ = [
    "Location",
    "UrlSynchronizer",
    "list_region_id",
    "term_parameter",
    "page_parameter",
    "join_selection",
    "split_selection",
    "read_selection",
    "write_url",
    "selection_target",
]

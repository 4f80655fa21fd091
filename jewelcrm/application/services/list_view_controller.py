"""List-view controller — the fetch / filter / paginate cycle behind every list page.

Each page owns one controller. Inputs (search term, filter selectors, page
number) are split into two groups when the controller is built:

* server-side inputs are sent to the backend, so changing one re-fetches;
* client-side inputs only feed ``predicate``, which is re-applied over the
  records already held.

Requests are tagged with a generation number. Starting a new fetch cancels
the one in flight, and a response that arrives for an older generation is
dropped, so the records on screen always belong to the latest inputs.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Collection, Sequence
from typing import Generic, TypeVar

from jewelcrm.domain.entities import ApiResponse, ListQuery, ListViewState, Record

from .record_normalizer import normalize_records

logger = logging.getLogger(__name__)

StatsT = TypeVar("StatsT")

Fetcher = Callable[[ListQuery], Awaitable[ApiResponse]]
Predicate = Callable[[Record, ListViewState], bool]
Listener = Callable[[ListViewState], None]

PAGE = "page"
SEARCH = "search"

# Selector values that mean "no filter"
_UNSET_FILTER_VALUES = frozenset({"", "all"})


def active_filter(state: ListViewState, name: str) -> str | None:
    """The selected value of filter ``name``, or ``None`` when nothing is selected."""
    value = state.filters.get(name)
    if value is None or value in _UNSET_FILTER_VALUES:
        return None
    return value


class ListViewController(Generic[StatsT]):
    """Owns ``records``/``loading`` and the inputs of one list page."""

    def __init__(
        self,
        fetcher: Fetcher,
        *,
        name: str = "records",
        server_params: Collection[str] = (),
        predicate: Predicate | None = None,
        stats: Callable[[Sequence[Record]], StatsT] | None = None,
        filters: dict[str, str] | None = None,
        page_size: int | None = None,
    ):
        self._fetcher = fetcher
        self._name = name
        self._server_params = frozenset(server_params)
        self._predicate = predicate
        self._stats = stats
        self._page_size = page_size
        self._state = ListViewState(filters=dict(filters or {}))
        self._listeners: list[Listener] = []
        self._inflight: asyncio.Task[list[Record]] | None = None
        self._closed = False

    # ── State access ────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> ListViewState:
        return self._state

    @property
    def records(self) -> list[Record]:
        return self._state.records

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def server_params(self) -> frozenset[str]:
        return self._server_params

    @property
    def visible_records(self) -> list[Record]:
        """Mapping records passing the client-side predicate; ``records`` is left untouched."""
        records = [r for r in self._state.records if isinstance(r, dict)]
        if self._predicate is None:
            return records
        return [r for r in records if self._predicate(r, self._state)]

    @property
    def page_records(self) -> list[Record]:
        """The current page of ``visible_records`` when paging happens locally."""
        visible = self.visible_records
        if self._page_size is None or PAGE in self._server_params:
            return visible
        start = (self._state.current_page - 1) * self._page_size
        return visible[start : start + self._page_size]

    @property
    def stats(self) -> StatsT | None:
        """Derived statistics over all fetched records, recomputed on every access."""
        if self._stats is None:
            return None
        return self._stats(self._state.records)

    def build_query(self) -> ListQuery:
        """Reduce the current inputs to the ones the backend filters on."""
        state = self._state
        return ListQuery(
            page=state.current_page if PAGE in self._server_params else None,
            search=(state.search_term or None) if SEARCH in self._server_params else None,
            filters={
                name: value
                for name in state.filters
                if name in self._server_params
                and (value := active_filter(state, name)) is not None
            },
        )

    # ── Listeners ───────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the state after every change; returns an unsubscribe."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("List listener failed for %s", self._name)

    # ── Inputs ──────────────────────────────────────────────────────

    async def set_search(self, term: str) -> None:
        if term == self._state.search_term:
            return
        self._state.search_term = term
        self._state.current_page = 1
        await self._input_changed(SEARCH)

    async def set_filter(self, name: str, value: str) -> None:
        if self._state.filters.get(name) == value:
            return
        self._state.filters[name] = value
        self._state.current_page = 1
        await self._input_changed(name)

    async def set_page(self, page: int) -> None:
        page = max(page, 1)
        if page == self._state.current_page:
            return
        self._state.current_page = page
        await self._input_changed(PAGE)

    async def _input_changed(self, name: str) -> None:
        if name in self._server_params:
            await self.refresh()
        else:
            self._notify()

    # ── Fetch cycle ─────────────────────────────────────────────────

    async def refresh(self) -> list[Record]:
        """(Re)load the records for the current inputs.

        Supersedes any fetch still in flight. Returns the records held once
        this call settles; if a newer fetch took over meanwhile, those are
        whatever the newer fetch has produced so far.
        """
        if self._closed:
            return list(self._state.records)

        self._state.generation += 1
        generation = self._state.generation

        previous = self._inflight
        if previous is not None and not previous.done():
            logger.debug("Cancelling superseded %s fetch", self._name)
            previous.cancel()

        self._state.loading = True
        self._notify()

        task = asyncio.ensure_future(self._load(generation))
        self._inflight = task
        try:
            await asyncio.wait([task])
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task.cancelled():
            return list(self._state.records)
        return task.result()

    async def _load(self, generation: int) -> list[Record]:
        query = self.build_query()
        outcome: tuple[list[Record], str | None] | None = None
        try:
            outcome = await self._fetch_records(query)
        finally:
            if generation == self._state.generation:
                if outcome is not None:
                    self._state.records, self._state.error = outcome
                self._state.loading = False
                self._notify()
            elif outcome is not None:
                logger.debug(
                    "Discarding stale %s response (generation %d < %d)",
                    self._name,
                    generation,
                    self._state.generation,
                )
        return list(self._state.records)

    async def _fetch_records(self, query: ListQuery) -> tuple[list[Record], str | None]:
        """Call the fetcher; failures degrade to an empty list plus an error message."""
        try:
            response = await self._fetcher(query)
        except Exception as exc:
            logger.error("Failed to fetch %s: %s", self._name, exc)
            return [], str(exc) or type(exc).__name__

        if not response.success:
            logger.warning("Fetching %s was rejected: %s", self._name, response.message)
            return [], response.message or "Request failed"

        records = normalize_records(response.data)
        logger.debug("Loaded %d %s", len(records), self._name)
        return records, None

    async def close(self) -> None:
        """Stop the controller: cancel the fetch in flight and ignore any later result."""
        self._closed = True
        self._state.generation += 1
        task = self._inflight
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait([task])
        self._state.loading = False
        self._listeners.clear()

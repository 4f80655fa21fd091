"""Domain entities for list pages — query inputs and view state."""

from dataclasses import dataclass, field
from typing import Any

Record = dict[str, Any]


@dataclass(frozen=True)
class ListQuery:
    """Inputs of one list fetch, already reduced to the server-side subset."""

    page: int | None = None
    search: str | None = None
    filters: dict[str, str] = field(default_factory=dict)

    def param(self, name: str) -> str | None:
        return self.filters.get(name) or None


@dataclass
class ListViewState:
    """Mutable state of one list page.

    ``records`` is always a list; it is replaced wholesale on every fetch
    and never patched in place.
    """

    records: list[Record] = field(default_factory=list)
    loading: bool = False
    search_term: str = ""
    filters: dict[str, str] = field(default_factory=dict)
    current_page: int = 1
    error: str | None = None
    generation: int = 0

"""Customer directory — the customers page with its trash, dialogs and CSV transfer.

Deleting a customer is a soft delete: the record moves to the trash list
(``/clients/clients/trash/``) and can be restored from there. Every write
is followed by a reload of the affected lists.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from jewelcrm.application.schemas import ClientCreate, ClientUpdate
from jewelcrm.domain.entities import CustomerStats, Record
from jewelcrm.domain.exceptions import ApiError, EntityNotFoundError

from .entity_views import customers_view, trashed_customers_view
from .list_view_controller import ListViewController
from .mutation_flow import Confirm, FormDialog, MutationResult, confirm_and_run, run_mutation
from .record_normalizer import normalize_records, read_text

if TYPE_CHECKING:
    from jewelcrm.infrastructure.api import CrmApiService

logger = logging.getLogger(__name__)


@dataclass
class ExportFile:
    filename: str
    content: bytes
    content_type: str


def customer_name(client: Record) -> str:
    name = " ".join(
        p for p in (read_text(client, "first_name"), read_text(client, "last_name")) if p
    )
    return name or f"customer #{read_text(client, 'id', '?')}"


class CustomerDirectory:
    """Customers list, trash list, add/edit dialogs and import/export."""

    def __init__(
        self,
        api: "CrmApiService",
        *,
        clock: Callable[[], datetime] | None = None,
    ):
        self._api = api
        self.customers: ListViewController[CustomerStats] = customers_view(api, clock=clock)
        self.trash: ListViewController[None] = trashed_customers_view(api)
        self.add_dialog = FormDialog(refresh=self.customers.refresh, description="create customer")
        self.edit_dialog = FormDialog(refresh=self.customers.refresh, description="update customer")
        self.editing_id: Any = None
        self._trash_opened = False

    async def load(self) -> list[Record]:
        return await self.customers.refresh()

    async def open_trash(self) -> list[Record]:
        self._trash_opened = True
        return await self.trash.refresh()

    # ── Add / edit ──────────────────────────────────────────────────

    def start_create(self, initial: dict[str, Any] | None = None) -> None:
        self.add_dialog.open(initial)

    async def submit_create(self) -> MutationResult:
        return await self.add_dialog.submit(
            lambda values: self._api.create_client(ClientCreate.model_validate(values))
        )

    def start_edit(self, client: Record) -> None:
        self.editing_id = client.get("id")
        self.edit_dialog.open(
            {k: v for k, v in client.items() if k in ClientUpdate.model_fields}
        )

    async def submit_edit(self) -> MutationResult:
        client_id = self.editing_id
        if client_id is None:
            return MutationResult.failed("No customer selected")
        result = await self.edit_dialog.submit(
            lambda values: self._api.update_client(client_id, ClientUpdate.model_validate(values))
        )
        if result.ok:
            self.editing_id = None
        return result

    # ── Trash ───────────────────────────────────────────────────────

    async def move_to_trash(self, client: Record, confirm: Confirm) -> MutationResult | None:
        """Soft-delete after confirmation; ``None`` when the user declined."""
        client_id = client.get("id")
        prompt = (
            f"Are you sure you want to move {customer_name(client)} to trash? "
            "You can restore them later from the Trash section."
        )
        return await confirm_and_run(
            prompt,
            confirm,
            lambda: self._api.delete_client(client_id),
            refresh=self._reload_after_delete,
            description=f"delete customer {client_id}",
        )

    async def restore(self, client_id: int | str) -> MutationResult:
        return await run_mutation(
            lambda: self._api.restore_client(client_id),
            refresh=self._reload_both,
            description=f"restore customer {client_id}",
        )

    async def _reload_after_delete(self) -> None:
        if self._trash_opened:
            await self._reload_both()
        else:
            await self.customers.refresh()

    async def _reload_both(self) -> None:
        await self.customers.refresh()
        await self.trash.refresh()
        self._trash_opened = True

    # ── Detail, history, import & export ────────────────────────────

    async def get_customer(self, client_id: int | str) -> Record:
        """Load one customer for the detail view.

        Raises:
            EntityNotFoundError: when the backend has no such customer.
        """
        try:
            response = await self._api.get_client(client_id)
        except ApiError as exc:
            if exc.status_code == 404:
                raise EntityNotFoundError("Customer", client_id) from exc
            raise
        if not response.success or not isinstance(response.data, dict):
            raise EntityNotFoundError("Customer", client_id)
        return response.data

    async def audit_log(self, client_id: int | str) -> list[Record]:
        try:
            response = await self._api.get_client_audit_logs(client_id)
        except Exception as exc:
            logger.error("Failed to fetch audit log for customer %s: %s", client_id, exc)
            return []
        return normalize_records(response.data) if response.success else []

    async def import_csv(self, filename: str, content: bytes) -> MutationResult:
        return await run_mutation(
            lambda: self._api.import_customers(filename, content),
            refresh=self.customers.refresh,
            description=f"import customers from {filename}",
        )

    async def export(self, format: str = "csv", fields: list[str] | None = None) -> MutationResult:
        """Download customers; on success ``result.data`` is an ExportFile."""
        result = await run_mutation(
            lambda: self._api.export_customers(format, fields),
            description="export customers",
        )
        if not result.ok:
            return result
        result.data = _export_file(result.data, format)
        return result


def _export_file(data: Any, format: str) -> ExportFile:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d")
    if isinstance(data, (bytes, bytearray)):
        # xlsx requests are served as CSV by the backend
        return ExportFile(
            filename=f"customers_export_{stamp}.csv",
            content=bytes(data),
            content_type="text/csv",
        )
    return ExportFile(
        filename=f"customers_export_{stamp}.json",
        content=json.dumps(data, indent=2, default=str).encode("utf-8"),
        content_type="application/json",
    )

"""Customer (client) endpoints, including trash/restore and CSV import/export."""

from jewelcrm.application.schemas import ClientCreate, ClientUpdate
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str

_EXPORT_ENDPOINTS = {
    "csv": "/clients/clients/export_csv/",
    # XLSX is not implemented server-side yet; the CSV export stands in for it
    "xlsx": "/clients/clients/export_csv/",
}


class ClientEndpoints(CrmHttpClient):

    async def get_clients(
        self,
        *,
        page: int | None = None,
        search: str | None = None,
        status: str | None = None,
        assigned_to: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/clients/clients/",
            params={
                "page": page,
                "search": search,
                "status": status,
                "assigned_to": assigned_to,
            },
        )

    async def get_client(self, client_id: RecordId) -> ApiResponse:
        return await self.request(f"/clients/clients/{client_id}/")

    async def create_client(self, client: ClientCreate | Body) -> ApiResponse:
        return await self.request("/clients/clients/", method="POST", json=client)

    async def update_client(self, client_id: RecordId, client: ClientUpdate | Body) -> ApiResponse:
        return await self.request(f"/clients/clients/{client_id}/", method="PUT", json=client)

    async def delete_client(self, client_id: RecordId) -> ApiResponse:
        """Soft delete — the customer moves to the trash and can be restored."""
        return await self.request(f"/clients/clients/{client_id}/", method="DELETE")

    async def get_trashed_clients(self) -> ApiResponse:
        return await self.request("/clients/clients/trash/")

    async def restore_client(self, client_id: RecordId) -> ApiResponse:
        return await self.request(f"/clients/clients/{client_id}/restore/", method="POST")

    async def get_client_audit_logs(self, client_id: RecordId) -> ApiResponse:
        return await self.request("/clients/audit-logs/", params={"client": client_id})

    async def get_customer_dropdown_options(self) -> ApiResponse:
        return await self.request("/clients/clients/dropdown_options/")

    async def import_customers(
        self, filename: str, content: bytes, content_type: str = "text/csv"
    ) -> ApiResponse:
        return await self.request(
            "/clients/clients/import_csv/",
            method="POST",
            files={"file": (filename, content, content_type)},
        )

    async def export_customers(self, format: str, fields: list[str] | None = None) -> ApiResponse:
        """Download customers as CSV (``data`` is bytes) or JSON."""
        endpoint = _EXPORT_ENDPOINTS.get(format, "/clients/clients/export_json/")
        return await self.request(
            endpoint, params={"fields": ",".join(fields) if fields else None}
        )

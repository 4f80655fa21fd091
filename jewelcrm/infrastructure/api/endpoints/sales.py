"""Sales order and sales pipeline endpoints."""

from jewelcrm.application.schemas import (
    PipelineCreate,
    PipelineUpdate,
    SaleCreate,
    SaleUpdate,
    StageTransition,
)
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str


class SalesEndpoints(CrmHttpClient):

    async def get_sales(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/sales/",
            params={
                "page": page,
                "status": status,
                "date_from": date_from,
                "date_to": date_to,
            },
        )

    async def get_sale(self, sale_id: RecordId) -> ApiResponse:
        return await self.request(f"/sales/{sale_id}/")

    async def create_sale(self, sale: SaleCreate | Body) -> ApiResponse:
        return await self.request("/sales/create/", method="POST", json=sale)

    async def update_sale(self, sale_id: RecordId, sale: SaleUpdate | Body) -> ApiResponse:
        return await self.request(f"/sales/{sale_id}/update/", method="PUT", json=sale)


class PipelineEndpoints(CrmHttpClient):

    async def get_sales_pipeline(
        self,
        *,
        page: int | None = None,
        stage: str | None = None,
        assigned_to: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/sales/pipeline/",
            params={"page": page, "stage": stage, "assigned_to": assigned_to},
        )

    async def get_pipeline(self, deal_id: RecordId) -> ApiResponse:
        return await self.request(f"/sales/pipeline/{deal_id}/")

    async def create_sales_pipeline(self, deal: PipelineCreate | Body) -> ApiResponse:
        return await self.request("/sales/pipeline/create/", method="POST", json=deal)

    async def update_pipeline(self, deal_id: RecordId, deal: PipelineUpdate | Body) -> ApiResponse:
        return await self.request(f"/sales/pipeline/{deal_id}/update/", method="PUT", json=deal)

    async def update_pipeline_stage(self, deal_id: RecordId, stage: str) -> ApiResponse:
        """Move a deal to another stage; the backend enforces which moves are legal."""
        return await self.request(
            f"/sales/pipeline/{deal_id}/transition/",
            method="POST",
            json=StageTransition(stage=stage),
        )

    async def delete_pipeline(self, deal_id: RecordId) -> ApiResponse:
        return await self.request(f"/sales/pipeline/{deal_id}/delete/", method="DELETE")

    async def get_pipeline_stats(self) -> ApiResponse:
        return await self.request("/sales/pipeline/stats/")

    async def get_pipeline_stages(self) -> ApiResponse:
        return await self.request("/sales/pipeline/stages/")

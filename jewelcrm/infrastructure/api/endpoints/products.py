"""Product catalogue and category endpoints."""

from jewelcrm.application.schemas import CategoryCreate, ProductCreate, ProductUpdate
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str

PRODUCT_PAGE_SIZE = 200


class ProductEndpoints(CrmHttpClient):

    async def get_products(
        self,
        *,
        page: int | None = None,
        category: str | None = None,
        search: str | None = None,
        status: str | None = None,
    ) -> ApiResponse:
        """Tenant-wide product list, fetched as one large page."""
        return await self.request(
            "/products/list/",
            params=_product_params(page, category, search, status),
        )

    async def get_my_products(
        self,
        *,
        page: int | None = None,
        category: str | None = None,
        search: str | None = None,
        status: str | None = None,
    ) -> ApiResponse:
        """Products scoped to the current user's store."""
        return await self.request(
            "/products/",
            params=_product_params(page, category, search, status),
        )

    async def get_product(self, product_id: RecordId) -> ApiResponse:
        return await self.request(f"/products/{product_id}/")

    async def create_product(self, product: ProductCreate | Body) -> ApiResponse:
        return await self.request("/products/create/", method="POST", json=product)

    async def update_product(self, product_id: RecordId, product: ProductUpdate | Body) -> ApiResponse:
        return await self.request(f"/products/{product_id}/update/", method="PUT", json=product)

    async def delete_product(self, product_id: RecordId) -> ApiResponse:
        return await self.request(f"/products/{product_id}/delete/", method="DELETE")

    async def get_product_stats(self) -> ApiResponse:
        return await self.request("/products/stats/")

    async def import_products(
        self, filename: str, content: bytes, content_type: str = "text/csv"
    ) -> ApiResponse:
        return await self.request(
            "/products/import/",
            method="POST",
            files={"file": (filename, content, content_type)},
        )

    # ── Categories ──────────────────────────────────────────────────

    async def get_product_categories(self) -> ApiResponse:
        return await self.request("/products/categories/")

    async def create_product_category(self, category: CategoryCreate | Body) -> ApiResponse:
        return await self.request("/products/categories/create/", method="POST", json=category)

    async def update_product_category(self, category_id: RecordId, category: Body) -> ApiResponse:
        return await self.request(f"/products/categories/{category_id}/", method="PUT", json=category)

    async def delete_product_category(self, category_id: RecordId) -> ApiResponse:
        return await self.request(f"/products/categories/{category_id}/", method="DELETE")


def _product_params(
    page: int | None, category: str | None, search: str | None, status: str | None
) -> dict[str, object]:
    return {
        "page": page,
        "category": category,
        "search": search,
        "status": status,
        "page_size": PRODUCT_PAGE_SIZE,
    }

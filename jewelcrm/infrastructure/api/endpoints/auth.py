"""Authentication, tenant administration and dashboard endpoints."""

import logging

from jewelcrm.application.schemas import LoginRequest, TenantCreate
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.domain.exceptions import ApiError, AuthenticationError, TransportError
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

logger = logging.getLogger(__name__)

RecordId = int | str


class AuthEndpoints(CrmHttpClient):

    async def login(self, username: str, password: str) -> ApiResponse:
        """``POST /auth/login/`` — replies ``{success, token, refresh, user}``."""
        return await self.request(
            "/auth/login/",
            method="POST",
            json=LoginRequest(username=username, password=password),
        )

    async def get_current_user(self) -> ApiResponse:
        return await self.request("/auth/profile/")

    async def logout(self) -> ApiResponse:
        """Invalidate the refresh token server-side, then forget the session.

        The local session is cleared exactly once, even when the server call
        fails. A 401 reply has already cleared it through the global logout.
        """
        token = self.session.get_token()
        if token:
            try:
                await self.request(
                    "/auth/logout/",
                    method="POST",
                    json={"refresh_token": token},
                )
            except AuthenticationError:
                return ApiResponse(data=None, success=True)
            except (ApiError, TransportError) as exc:
                logger.warning("Logout request failed: %s", exc)

        self.session.clear()
        return ApiResponse(data=None, success=True)


class TenantEndpoints(CrmHttpClient):

    async def get_tenants(self) -> ApiResponse:
        return await self.request("/tenants/")

    async def get_tenant(self, tenant_id: RecordId) -> ApiResponse:
        return await self.request(f"/tenants/{tenant_id}/")

    async def create_tenant(self, tenant: TenantCreate | Body) -> ApiResponse:
        return await self.request("/tenants/create/", method="POST", json=tenant)

    async def update_tenant(self, tenant_id: RecordId, tenant: Body) -> ApiResponse:
        return await self.request(f"/tenants/{tenant_id}/update/", method="PUT", json=tenant)

    async def delete_tenant(self, tenant_id: RecordId) -> ApiResponse:
        return await self.request(f"/tenants/{tenant_id}/delete/", method="DELETE")


class DashboardEndpoints(CrmHttpClient):

    async def get_dashboard_stats(self) -> ApiResponse:
        return await self.request("/analytics/dashboard/")

    async def get_business_admin_dashboard(self) -> ApiResponse:
        return await self.request("/tenants/dashboard/")

    async def get_platform_admin_dashboard(self) -> ApiResponse:
        return await self.request("/tenants/platform-dashboard/")

    async def get_analytics(
        self, *, period: str | None = None, type: str | None = None
    ) -> ApiResponse:
        return await self.request(
            "/analytics/dashboard/", params={"period": period, "type": type}
        )

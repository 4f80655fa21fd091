"""Team member, store and workspace (tasks, follow-ups, marketing) endpoints."""

from jewelcrm.application.schemas import StoreCreate, TeamMemberCreate, TeamMemberUpdate
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str


class TeamEndpoints(CrmHttpClient):

    async def get_team_members(self) -> ApiResponse:
        return await self.request("/auth/team-members/")

    async def create_team_member(self, member: TeamMemberCreate | Body) -> ApiResponse:
        return await self.request("/auth/team-members/", method="POST", json=member)

    async def update_team_member(
        self, member_id: RecordId, member: TeamMemberUpdate | Body
    ) -> ApiResponse:
        return await self.request(f"/auth/team-members/{member_id}/update/", method="PUT", json=member)

    async def delete_team_member(self, member_id: RecordId) -> ApiResponse:
        return await self.request(f"/auth/team-members/{member_id}/delete/", method="DELETE")


class StoreEndpoints(CrmHttpClient):

    async def get_stores(self) -> ApiResponse:
        return await self.request("/stores/")

    async def get_store(self, store_id: RecordId) -> ApiResponse:
        return await self.request(f"/stores/{store_id}/")

    async def create_store(self, store: StoreCreate | Body) -> ApiResponse:
        return await self.request("/stores/", method="POST", json=store)

    async def update_store(self, store_id: RecordId, store: Body) -> ApiResponse:
        return await self.request(f"/stores/{store_id}/", method="PUT", json=store)

    async def delete_store(self, store_id: RecordId) -> ApiResponse:
        return await self.request(f"/stores/{store_id}/", method="DELETE")


class WorkspaceEndpoints(CrmHttpClient):

    async def get_integrations(self) -> ApiResponse:
        return await self.request("/integrations/")

    async def get_tasks(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        assigned_to: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/tasks/tasks/",
            params={"page": page, "status": status, "assigned_to": assigned_to},
        )

    async def create_task(self, task: Body) -> ApiResponse:
        return await self.request("/tasks/tasks/", method="POST", json=task)

    async def get_follow_ups(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        client: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/clients/follow-ups/",
            params={"page": page, "status": status, "client": client},
        )

    async def create_follow_up(self, follow_up: Body) -> ApiResponse:
        return await self.request("/clients/follow-ups/", method="POST", json=follow_up)

    async def get_marketing_campaigns(self) -> ApiResponse:
        return await self.request("/marketing/campaigns/")

    async def create_marketing_campaign(self, campaign: Body) -> ApiResponse:
        return await self.request("/marketing/campaigns/", method="POST", json=campaign)

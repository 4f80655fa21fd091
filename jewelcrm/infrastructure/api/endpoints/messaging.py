"""Announcements, team messages, support tickets and escalations."""

from jewelcrm.application.schemas import (
    AnnouncementCreate,
    EscalationNoteCreate,
    MessageReply,
    SupportTicketCreate,
    TicketMessageCreate,
)
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str


class AnnouncementEndpoints(CrmHttpClient):

    async def get_announcements(
        self,
        *,
        page: int | None = None,
        priority: str | None = None,
        type: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/announcements/announcements/",
            params={"page": page, "priority": priority, "type": type},
        )

    async def create_announcement(self, announcement: AnnouncementCreate | Body) -> ApiResponse:
        return await self.request("/announcements/announcements/", method="POST", json=announcement)

    async def mark_announcement_as_read(self, announcement_id: RecordId) -> ApiResponse:
        return await self.request(
            f"/announcements/announcements/{announcement_id}/mark_as_read/", method="POST"
        )

    async def acknowledge_announcement(self, announcement_id: RecordId) -> ApiResponse:
        return await self.request(
            f"/announcements/announcements/{announcement_id}/acknowledge/", method="POST"
        )

    async def get_team_messages(
        self, *, page: int | None = None, type: str | None = None
    ) -> ApiResponse:
        return await self.request(
            "/announcements/messages/", params={"page": page, "type": type}
        )

    async def create_team_message(self, message: Body) -> ApiResponse:
        return await self.request("/announcements/messages/", method="POST", json=message)

    async def mark_message_as_read(self, message_id: RecordId) -> ApiResponse:
        return await self.request(
            f"/announcements/messages/{message_id}/mark_as_read/", method="POST"
        )

    async def reply_to_message(self, message_id: RecordId, reply: MessageReply | Body) -> ApiResponse:
        return await self.request(
            f"/announcements/messages/{message_id}/reply/", method="POST", json=reply
        )


class SupportEndpoints(CrmHttpClient):

    async def get_support_tickets(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        priority: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/support/tickets/",
            params={
                "page": page,
                "status": status,
                "priority": priority,
                "category": category,
                "search": search,
            },
        )

    async def get_support_ticket(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/")

    async def create_support_ticket(self, ticket: SupportTicketCreate | Body) -> ApiResponse:
        return await self.request("/support/tickets/", method="POST", json=ticket)

    async def update_support_ticket(self, ticket_id: RecordId, ticket: Body) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/", method="PUT", json=ticket)

    async def delete_support_ticket(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/", method="DELETE")

    async def assign_ticket_to_me(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/assign_to_me/", method="POST")

    async def resolve_ticket(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/resolve/", method="POST")

    async def close_ticket(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/close/", method="POST")

    async def reopen_ticket(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request(f"/support/tickets/{ticket_id}/reopen/", method="POST")

    async def get_ticket_messages(self, ticket_id: RecordId) -> ApiResponse:
        return await self.request("/support/messages/", params={"ticket": ticket_id})

    async def create_ticket_message(
        self, ticket_id: RecordId, message: TicketMessageCreate | Body
    ) -> ApiResponse:
        body = (
            message.model_dump(mode="json", exclude_none=True)
            if isinstance(message, TicketMessageCreate)
            else dict(message)
        )
        body["ticket"] = ticket_id
        return await self.request("/support/messages/", method="POST", json=body)


class EscalationEndpoints(CrmHttpClient):

    async def get_escalations(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        priority: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/escalation/",
            params={
                "page": page,
                "status": status,
                "priority": priority,
                "category": category,
                "search": search,
            },
        )

    async def get_my_escalations(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        priority: str | None = None,
        category: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/escalation/my-escalations/",
            params={
                "page": page,
                "status": status,
                "priority": priority,
                "category": category,
            },
        )

    async def get_escalation(self, escalation_id: RecordId) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/")

    async def create_escalation(self, escalation: Body) -> ApiResponse:
        return await self.request("/escalation/", method="POST", json=escalation)

    async def update_escalation(self, escalation_id: RecordId, escalation: Body) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/", method="PUT", json=escalation)

    async def assign_escalation(self, escalation_id: RecordId, user_id: int) -> ApiResponse:
        return await self.request(
            f"/escalation/{escalation_id}/assign/",
            method="POST",
            json={"assigned_to": user_id},
        )

    async def change_escalation_status(self, escalation_id: RecordId, status: str) -> ApiResponse:
        return await self.request(
            f"/escalation/{escalation_id}/change_status/",
            method="POST",
            json={"status": status},
        )

    async def resolve_escalation(self, escalation_id: RecordId) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/resolve/", method="POST")

    async def close_escalation(self, escalation_id: RecordId) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/close/", method="POST")

    async def get_escalation_notes(self, escalation_id: RecordId) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/notes/")

    async def create_escalation_note(
        self, escalation_id: RecordId, note: EscalationNoteCreate | Body
    ) -> ApiResponse:
        return await self.request(f"/escalation/{escalation_id}/notes/", method="POST", json=note)

    async def get_escalation_stats(self) -> ApiResponse:
        return await self.request("/escalation/stats/")

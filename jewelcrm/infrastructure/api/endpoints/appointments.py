"""Appointment endpoints and their status actions."""

import datetime as dt

from jewelcrm.application.schemas import (
    AppointmentCreate,
    AppointmentReschedule,
    AppointmentUpdate,
)
from jewelcrm.domain.entities import ApiResponse
from jewelcrm.infrastructure.api.http_client import Body, CrmHttpClient

RecordId = int | str


class AppointmentEndpoints(CrmHttpClient):

    async def get_appointments(
        self,
        *,
        page: int | None = None,
        status: str | None = None,
        date: str | None = None,
        client: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            "/clients/appointments/",
            params={"page": page, "status": status, "date": date, "client": client},
        )

    async def create_appointment(self, appointment: AppointmentCreate | Body) -> ApiResponse:
        return await self.request("/clients/appointments/", method="POST", json=appointment)

    async def update_appointment(
        self, appointment_id: RecordId, appointment: AppointmentUpdate | Body
    ) -> ApiResponse:
        return await self.request(
            f"/clients/appointments/{appointment_id}/", method="PUT", json=appointment
        )

    async def confirm_appointment(self, appointment_id: RecordId) -> ApiResponse:
        return await self.request(f"/clients/appointments/{appointment_id}/confirm/", method="POST")

    async def complete_appointment(
        self, appointment_id: RecordId, outcome_notes: str | None = None
    ) -> ApiResponse:
        return await self.request(
            f"/clients/appointments/{appointment_id}/complete/",
            method="POST",
            json={"outcome_notes": outcome_notes} if outcome_notes is not None else {},
        )

    async def cancel_appointment(
        self, appointment_id: RecordId, reason: str | None = None
    ) -> ApiResponse:
        return await self.request(
            f"/clients/appointments/{appointment_id}/cancel/",
            method="POST",
            json={"reason": reason} if reason is not None else {},
        )

    async def reschedule_appointment(
        self,
        appointment_id: RecordId,
        new_date: dt.date,
        new_time: dt.time,
        reason: str | None = None,
    ) -> ApiResponse:
        return await self.request(
            f"/clients/appointments/{appointment_id}/reschedule/",
            method="POST",
            json=AppointmentReschedule(new_date=new_date, new_time=new_time, reason=reason),
        )

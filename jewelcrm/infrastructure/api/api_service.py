"""CrmApiService — the facade every list page and flow talks to."""

from .endpoints import (
    AnnouncementEndpoints,
    AppointmentEndpoints,
    AuthEndpoints,
    ClientEndpoints,
    DashboardEndpoints,
    EscalationEndpoints,
    PipelineEndpoints,
    ProductEndpoints,
    SalesEndpoints,
    StoreEndpoints,
    SupportEndpoints,
    TeamEndpoints,
    TenantEndpoints,
    WorkspaceEndpoints,
)


class CrmApiService(
    AuthEndpoints,
    TenantEndpoints,
    DashboardEndpoints,
    ClientEndpoints,
    ProductEndpoints,
    SalesEndpoints,
    PipelineEndpoints,
    AppointmentEndpoints,
    TeamEndpoints,
    StoreEndpoints,
    WorkspaceEndpoints,
    AnnouncementEndpoints,
    SupportEndpoints,
    EscalationEndpoints,
):
    """One method per resource/action pair, all delegating to ``request``.

    Construct once per process with the shared session provider::

        api = CrmApiService(settings.api_base_url, session_store)
        clients = await api.get_clients(status="lead")
    """

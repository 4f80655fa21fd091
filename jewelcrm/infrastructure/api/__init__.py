"""CRM REST API infrastructure package."""

from .api_service import CrmApiService
from .http_client import CrmHttpClient, build_query

__all__ = ["CrmApiService", "CrmHttpClient", "build_query"]

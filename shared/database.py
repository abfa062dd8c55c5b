"""
Database client factory for Supabase.

The backend talks to Postgres through the Supabase service-role client.
Authorization is enforced in the service layer, not through RLS.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None

# Postgres SQLSTATE codes surfaced by PostgREST errors
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key

    Raises:
        RuntimeError: If the Supabase URL or key is not configured
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        logger.info("Creating Supabase client for %s", settings.supabase_url)
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None

"""
Supabase client factory.

Two kinds of client are handed out:
- one cached service-role client for table access and the auth admin API
- a new anon-key client per password sign-in, because signing in stores the
  end user's session on whichever client performed it
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

_service_client: Optional[Client] = None


def _connect(key_field: str) -> Client:
    settings = get_settings()
    key = getattr(settings, key_field)
    if not settings.supabase_url or not key:
        raise RuntimeError(
            f"Supabase configuration missing: set SUPABASE_URL and {key_field.upper()}."
        )
    return create_client(settings.supabase_url, key)


def get_supabase_client() -> Client:
    """Service-role client shared by every repository. Bypasses RLS."""
    global _service_client

    if _service_client is None:
        _service_client = _connect("supabase_service_role_key")
    return _service_client


def get_supabase_auth_client() -> Client:
    """New anon-key client for a single end-user sign-in."""
    return _connect("supabase_anon_key")


def reset_client_cache() -> None:
    """Forget the cached service-role client (tests, config reloads)."""
    global _service_client
    _service_client = None

"""
Infrastructure Gateway Layer.

This package provides the Supabase-backed implementation of the Gateway
port defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseGateway

    client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
    gateway = SupabaseGateway(client)
"""

from infrastructure.db.supabase_gateway import (
    SupabaseAuthGateway,
    SupabaseGateway,
    SupabaseInsertQuery,
    SupabaseTableGateway,
    to_session,
)

__all__ = [
    "SupabaseGateway",
    "SupabaseAuthGateway",
    "SupabaseTableGateway",
    "SupabaseInsertQuery",
    "to_session",
]

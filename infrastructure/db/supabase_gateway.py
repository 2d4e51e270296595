"""
Supabase implementation of the Gateway port.

The synchronous Supabase client is driven through run_in_threadpool so that
every gateway call is awaitable from the event loop. Client exceptions are
caught here, logged, and returned as ``error`` strings.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from starlette.concurrency import run_in_threadpool
from supabase import Client

from application.ports import AuthResult, QueryResult, Row, SessionListener, Unsubscribe
from domain.models import Session

logger = logging.getLogger(__name__)


def _error_message(exc: Exception) -> str:
    """Human-readable message for postgrest / auth errors."""
    message = getattr(exc, "message", None)
    return str(message) if message else str(exc)


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def to_session(raw: Any) -> Optional[Session]:
    """
    Convert a Supabase auth session to the domain Session.

    Args:
        raw: Supabase session object (or None)

    Returns:
        Session, or None when raw is None or has no user
    """
    if raw is None:
        return None
    user = getattr(raw, "user", None)
    if user is None:
        return None
    return Session(
        access_token=raw.access_token,
        user_id=str(user.id),
        email=getattr(user, "email", None),
    )


class SupabaseAuthGateway:
    """Auth subsystem backed by the Supabase auth client."""

    def __init__(self, client: Client):
        self._client = client

    async def get_current_session(self) -> Optional[Session]:
        try:
            raw = await run_in_threadpool(self._client.auth.get_session)
        except Exception as e:
            logger.error(f"Failed to resolve current session: {e}")
            return None
        return to_session(raw)

    def on_session_change(self, callback: SessionListener) -> Unsubscribe:
        """
        Subscribe to auth state changes.

        The sync client fires listeners on whichever thread ran the auth
        call, usually a threadpool worker. When subscribed from a running
        event loop, notifications from other threads are handed back to that
        loop with call_soon_threadsafe.
        """
        loop = _running_loop()

        def _listener(event: Any, raw_session: Any) -> None:
            session = to_session(raw_session)
            if loop is None or _running_loop() is loop:
                callback(str(event), session)
            else:
                loop.call_soon_threadsafe(callback, str(event), session)

        subscription = self._client.auth.on_auth_state_change(_listener)
        return subscription.unsubscribe

    async def sign_in_with_password(self, email: str, password: str) -> AuthResult:
        try:
            response = await run_in_threadpool(
                self._client.auth.sign_in_with_password,
                {"email": email, "password": password},
            )
        except Exception as e:
            logger.warning(f"Sign-in failed for {email}: {e}")
            return AuthResult(error=_error_message(e))
        logger.info(f"Signed in as {email}")
        return AuthResult(session=to_session(getattr(response, "session", None)))

    async def sign_up(self, email: str, password: str) -> AuthResult:
        try:
            response = await run_in_threadpool(
                self._client.auth.sign_up,
                {"email": email, "password": password},
            )
        except Exception as e:
            logger.warning(f"Sign-up failed for {email}: {e}")
            return AuthResult(error=_error_message(e))
        logger.info(f"Sign-up submitted for {email}")
        return AuthResult(session=to_session(getattr(response, "session", None)))

    async def sign_out(self) -> AuthResult:
        try:
            await run_in_threadpool(self._client.auth.sign_out)
        except Exception as e:
            logger.warning(f"Sign-out failed: {e}")
            return AuthResult(error=_error_message(e))
        logger.info("Signed out")
        return AuthResult()


class SupabaseInsertQuery:
    """Pending insert into one Supabase table."""

    def __init__(self, client: Client, table: str, records: Union[Row, List[Row]]):
        self._client = client
        self._table = table
        self._records = records

    def _run(self) -> List[Row]:
        result = self._client.table(self._table).insert(self._records).execute()
        return result.data if result.data else []

    async def execute(self) -> QueryResult:
        try:
            rows = await run_in_threadpool(self._run)
        except Exception as e:
            error_msg = _error_message(e)
            logger.error(f"Failed to insert into {self._table}: {e}")
            if "PGRST" in error_msg or "row-level security" in error_msg.lower():
                logger.error("RLS/Permissions error: check the table policies for the signed-in user")
            return QueryResult(error=error_msg)
        logger.info(f"Inserted {len(rows)} row(s) into {self._table}")
        return QueryResult(data=rows)

    async def select_one(self, columns: str = "*") -> QueryResult:
        result = await self.execute()
        if not result.ok or not result.data:
            return result
        row = result.data[0]
        if columns.strip() != "*":
            wanted = [c.strip() for c in columns.split(",") if c.strip()]
            row = {c: row.get(c) for c in wanted}
        return QueryResult(data=[row])


class SupabaseTableGateway:
    """Query surface for one named Supabase table."""

    def __init__(self, client: Client, name: str):
        self._client = client
        self._name = name

    def _select_all(self) -> List[Row]:
        result = self._client.table(self._name).select("*").execute()
        return result.data if result.data else []

    async def select_all(self) -> QueryResult:
        try:
            rows = await run_in_threadpool(self._select_all)
        except Exception as e:
            logger.error(f"Failed to fetch {self._name}: {e}")
            return QueryResult(error=_error_message(e))
        return QueryResult(data=rows)

    def insert(self, records: Union[Row, Sequence[Row]]) -> SupabaseInsertQuery:
        payload: Union[Dict[str, Any], List[Row]] = (
            dict(records) if isinstance(records, dict) else list(records)
        )
        return SupabaseInsertQuery(self._client, self._name, payload)


class SupabaseGateway:
    """
    Supabase implementation of the Gateway protocol.

    The client is injected via constructor for testability.

    Usage:
        client = create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
        gateway = SupabaseGateway(client)
        rows = await gateway.table("workouts").select_all()
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client
        self._auth = SupabaseAuthGateway(client)

    @property
    def auth(self) -> SupabaseAuthGateway:
        return self._auth

    def table(self, name: str) -> SupabaseTableGateway:
        return SupabaseTableGateway(self._client, name)

"""
Remote Data Gateway Interface (Port).

This module defines the capability surface the dashboard consumes from its
remote table store and auth service. Implementations may use Supabase, an
in-memory fake, or any other backend offering the same capabilities.

Every gateway call is asynchronous. Failures are reported through the
``error`` field of the returned result, never raised.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Union

from domain.models import Session

Row = Dict[str, Any]

# Callback signature for auth notifications: (event name, new session or None)
SessionListener = Callable[[str, Optional[Session]], None]
Unsubscribe = Callable[[], None]


@dataclass
class QueryResult:
    """Rows returned by a table query, or the error message that replaced them."""

    data: List[Row] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class AuthResult:
    """Outcome of a sign-in / sign-up / sign-out call."""

    error: Optional[str] = None
    session: Optional[Session] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AuthGateway(Protocol):
    """Auth subsystem: session issuance, lookup, sign-out, change stream."""

    async def get_current_session(self) -> Optional[Session]:
        """
        Resolve the current session.

        Returns:
            The active session, or None when signed out / expired
        """
        ...

    def on_session_change(self, callback: SessionListener) -> Unsubscribe:
        """
        Subscribe to auth change notifications.

        The callback is invoked for sign-in, sign-out and token refresh,
        with the new session (None after sign-out).

        Args:
            callback: Listener called as callback(event, session)

        Returns:
            A function that removes the subscription
        """
        ...

    async def sign_in_with_password(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password."""
        ...

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a new account; confirmation may be required."""
        ...

    async def sign_out(self) -> AuthResult:
        """End the current session."""
        ...


class InsertQuery(Protocol):
    """A pending insert; either executed as-is or asked to return one row."""

    async def execute(self) -> QueryResult:
        """Run the insert and return the inserted rows."""
        ...

    async def select_one(self, columns: str = "*") -> QueryResult:
        """
        Run the insert and return exactly one inserted row.

        Args:
            columns: Comma-separated column list to return (e.g. "id")

        Returns:
            QueryResult whose data holds a single row, or an error
        """
        ...


class TableGateway(Protocol):
    """Query surface for one named table."""

    async def select_all(self) -> QueryResult:
        """Full unfiltered fetch (``select *``)."""
        ...

    def insert(self, records: Union[Row, Sequence[Row]]) -> InsertQuery:
        """
        Prepare an insert of one record or a batch of records.

        Args:
            records: A row dict, or a sequence of row dicts

        Returns:
            InsertQuery to execute
        """
        ...


class Gateway(Protocol):
    """
    Abstract interface for the remote table store and auth service.

    Usage:
        session = await gateway.auth.get_current_session()
        result = await gateway.table("workouts").select_all()
        created = await gateway.table("workouts").insert(row).select_one("id")
    """

    @property
    def auth(self) -> AuthGateway:
        ...

    def table(self, name: str) -> TableGateway:
        ...

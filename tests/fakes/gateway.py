"""
Fake Gateway for testing.

This module provides an in-memory implementation of the Gateway port
(auth subsystem plus named tables) for fast, isolated testing without a
Supabase project.

Besides seeding rows, a test can:
- make a table's fetch or insert fail with a message
- hold fetches (or the session lookup) open and resolve them later, in any
  order, to exercise stale-result handling
- emit auth change notifications to every subscriber
"""
import asyncio
import copy
import uuid
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from application.ports import AuthResult, QueryResult, Row, SessionListener
from domain.models import Session


def make_session(
    user_id: str = "user-1",
    email: Optional[str] = "athlete@example.com",
    access_token: str = "token-1",
) -> Session:
    return Session(access_token=access_token, user_id=user_id, email=email)


class FakeAuth:
    """
    In-memory fake of the AuthGateway port.

    Usage:
        auth = FakeAuth(session=make_session())
        auth.emit("SIGNED_OUT", None)
    """

    def __init__(self, session: Optional[Session] = None):
        self.session = session
        self.hold_session = False
        self.sign_in_error: Optional[str] = None
        self.sign_up_error: Optional[str] = None
        self.sign_out_error: Optional[str] = None
        self.get_session_calls = 0
        self.sign_in_calls: List[Tuple[str, str]] = []
        self._listeners: List[SessionListener] = []
        self._pending: List[asyncio.Future] = []

    def reset(self) -> None:
        self.session = None
        self.hold_session = False
        self.sign_in_error = None
        self.sign_up_error = None
        self.sign_out_error = None
        self.get_session_calls = 0
        self.sign_in_calls.clear()
        self._listeners.clear()
        self._pending.clear()

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, event: str, session: Optional[Session]) -> None:
        """Change the current session and notify every subscriber."""
        self.session = session
        for listener in list(self._listeners):
            listener(event, session)

    def resolve_session(self, session: Optional[Session] = None) -> None:
        """Complete the oldest held get_current_session() call."""
        self._pending.pop(0).set_result(session)

    # =========================================================================
    # AuthGateway Protocol Methods
    # =========================================================================

    async def get_current_session(self) -> Optional[Session]:
        self.get_session_calls += 1
        if self.hold_session:
            future = asyncio.get_running_loop().create_future()
            self._pending.append(future)
            return await future
        return self.session

    def on_session_change(self, callback: SessionListener):
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    async def sign_in_with_password(self, email: str, password: str) -> AuthResult:
        self.sign_in_calls.append((email, password))
        if self.sign_in_error is not None:
            return AuthResult(error=self.sign_in_error)
        session = make_session(email=email)
        self.emit("SIGNED_IN", session)
        return AuthResult(session=session)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        if self.sign_up_error is not None:
            return AuthResult(error=self.sign_up_error)
        return AuthResult()

    async def sign_out(self) -> AuthResult:
        if self.sign_out_error is not None:
            return AuthResult(error=self.sign_out_error)
        self.emit("SIGNED_OUT", None)
        return AuthResult()


class FakeInsertQuery:
    def __init__(self, gateway: "FakeGateway", table: str, records: List[Row]):
        self._gateway = gateway
        self._table = table
        self._records = records

    async def execute(self) -> QueryResult:
        return self._gateway._insert(self._table, self._records)

    async def select_one(self, columns: str = "*") -> QueryResult:
        result = self._gateway._insert(self._table, self._records)
        if result.error is not None or not result.data:
            return result
        row = result.data[0]
        if columns.strip() != "*":
            row = {c.strip(): row.get(c.strip()) for c in columns.split(",")}
        return QueryResult(data=[row])


class FakeTable:
    def __init__(self, gateway: "FakeGateway", name: str):
        self._gateway = gateway
        self._name = name

    async def select_all(self) -> QueryResult:
        return await self._gateway._select(self._name)

    def insert(self, records: Union[Row, Sequence[Row]]) -> FakeInsertQuery:
        batch = [records] if isinstance(records, dict) else list(records)
        return FakeInsertQuery(self._gateway, self._name, batch)


class FakeGateway:
    """
    In-memory fake implementation of the Gateway port for testing.

    Stores rows in a dict keyed by table name. Supports seeding with test
    data and resets between tests.

    Usage:
        gateway = FakeGateway(session=make_session())
        gateway.seed("workouts", [{"id": "w1", "title": "Push"}])
        result = await gateway.table("workouts").select_all()
    """

    def __init__(self, session: Optional[Session] = None):
        self.auth = FakeAuth(session=session)
        self._tables: Dict[str, List[Row]] = {}
        self._select_errors: Dict[str, str] = {}
        self._insert_errors: Dict[str, str] = {}
        self.hold_selects = False
        self.select_calls: List[str] = []
        self.inserts: List[Tuple[str, List[Row]]] = []
        self._pending: List[Tuple[str, asyncio.Future]] = []

    def reset(self) -> None:
        """Clear all rows, errors and recorded calls."""
        self.auth.reset()
        self._tables.clear()
        self._select_errors.clear()
        self._insert_errors.clear()
        self.hold_selects = False
        self.select_calls.clear()
        self.inserts.clear()
        self._pending.clear()

    def seed(self, table: str, rows: List[Row]) -> None:
        self._tables.setdefault(table, []).extend(copy.deepcopy(rows))

    def rows(self, table: str) -> List[Row]:
        """Get all stored rows of a table (test helper)."""
        return copy.deepcopy(self._tables.get(table, []))

    def fail_select(self, table: str, message: str) -> None:
        self._select_errors[table] = message

    def fail_insert(self, table: str, message: str) -> None:
        self._insert_errors[table] = message

    def clear_failures(self) -> None:
        self._select_errors.clear()
        self._insert_errors.clear()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def resolve(self, index: int = 0, result: Optional[QueryResult] = None) -> None:
        """
        Complete a held fetch.

        Args:
            index: Position among the still-pending fetches (0 = oldest)
            result: Result to deliver; defaults to the table's current rows
        """
        table, future = self._pending.pop(index)
        future.set_result(result if result is not None else self._snapshot(table))

    def table(self, name: str) -> FakeTable:
        return FakeTable(self, name)

    def _snapshot(self, table: str) -> QueryResult:
        if table in self._select_errors:
            return QueryResult(error=self._select_errors[table])
        return QueryResult(data=self.rows(table))

    async def _select(self, table: str) -> QueryResult:
        self.select_calls.append(table)
        if self.hold_selects:
            future = asyncio.get_running_loop().create_future()
            self._pending.append((table, future))
            return await future
        return self._snapshot(table)

    def _insert(self, table: str, records: List[Row]) -> QueryResult:
        self.inserts.append((table, copy.deepcopy(records)))
        if table in self._insert_errors:
            return QueryResult(error=self._insert_errors[table])
        created = [{"id": str(uuid.uuid4()), **record} for record in records]
        self.seed(table, created)
        return QueryResult(data=copy.deepcopy(created))

"""
Table Data Loader.

Fetch-on-activation accessor for a single named table. A loader re-fetches
whenever one of its inputs (gateway, enabled flag, table, refresh token)
changes; callers drive refreshes by bumping the refresh token. There is no
polling and no request coalescing.

Usage:
    loader = workouts_loader(gateway, enabled=True)
    state = await loader.load()
    ...
    loader.refresh()
    state = await loader.wait()
    loader.close()
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from typing import Any, AsyncIterator, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from application.ports import Gateway
from domain.models import Profile, Workout, WorkoutExercise

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"
WORKOUTS_TABLE = "workouts"
WORKOUT_EXERCISES_TABLE = "workout_exercises"

RowT = TypeVar("RowT", bound=BaseModel)

_UNSET: Any = object()


@dataclass(frozen=True)
class LoadState(Generic[RowT]):
    """Snapshot of a loader: rows, in-progress flag, error message."""

    data: List[RowT] = field(default_factory=list)
    loading: bool = True
    error: Optional[str] = None


class TableDataLoader(Generic[RowT]):
    """
    Loads every row of one table into typed models.

    Each input change and close() bumps a generation counter. A fetch
    captures the generation when it starts and only commits its result if
    the counter is unchanged when it resumes; superseded fetches are
    dropped, not cancelled.
    """

    def __init__(
        self,
        gateway: Optional[Gateway],
        table: str,
        row_model: Type[RowT],
        *,
        enabled: bool = True,
        refresh_token: int = 0,
    ) -> None:
        self._gateway = gateway
        self._table = table
        self._row_model = row_model
        self._enabled = enabled
        self._refresh_token = refresh_token
        self._state: LoadState[RowT] = LoadState()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._started = False
        self._closed = False

    @property
    def state(self) -> LoadState[RowT]:
        return self._state

    @property
    def table(self) -> str:
        return self._table

    @property
    def refresh_token(self) -> int:
        return self._refresh_token

    @property
    def is_active(self) -> bool:
        """True when the loader would fetch: gateway present and enabled."""
        return self._gateway is not None and self._enabled and not self._closed

    def start(self) -> Optional[asyncio.Task]:
        """
        Activate the loader.

        Returns:
            The fetch task, or None when the loader is inert

        Raises:
            RuntimeError: If the loader was already started
        """
        if self._started:
            raise RuntimeError(f"Loader for {self._table} already started")
        self._started = True
        return self._activate()

    def update(
        self,
        *,
        gateway: Optional[Gateway] = _UNSET,
        enabled: bool = _UNSET,
        table: str = _UNSET,
        refresh_token: int = _UNSET,
    ) -> Optional[asyncio.Task]:
        """
        Apply new inputs; starts a fetch if any of them changed.

        Returns:
            The new fetch task, or None if nothing changed or the loader is inert
        """
        changed = False
        if gateway is not _UNSET and gateway is not self._gateway:
            self._gateway = gateway
            changed = True
        if enabled is not _UNSET and enabled != self._enabled:
            self._enabled = enabled
            changed = True
        if table is not _UNSET and table != self._table:
            self._table = table
            changed = True
        if refresh_token is not _UNSET and refresh_token != self._refresh_token:
            self._refresh_token = refresh_token
            changed = True

        if not changed:
            return None
        self._generation += 1
        if not self._started:
            return None
        return self._activate()

    def refresh(self) -> Optional[asyncio.Task]:
        """Bump the refresh token, triggering exactly one new fetch."""
        return self.update(refresh_token=self._refresh_token + 1)

    async def wait(self) -> LoadState[RowT]:
        """Wait for the latest fetch (if any) and return the current state."""
        if self._task is not None:
            await self._task
        return self._state

    async def load(self) -> LoadState[RowT]:
        """Start the loader and wait for its first fetch."""
        self.start()
        return await self.wait()

    def close(self) -> None:
        """Tear down: any fetch still in flight will not touch state."""
        self._closed = True
        self._generation += 1

    def _activate(self) -> Optional[asyncio.Task]:
        if not self.is_active:
            return None
        self._state = replace(self._state, loading=True, error=None)
        self._task = asyncio.create_task(
            self._fetch(self._gateway, self._table, self._generation)
        )
        return self._task

    async def _fetch(self, gateway: Gateway, table: str, generation: int) -> None:
        result = await gateway.table(table).select_all()
        if generation != self._generation:
            logger.debug(f"Dropping stale fetch of {table}")
            return

        if result.error is not None:
            logger.warning(f"Fetch of {table} failed: {result.error}")
            self._state = LoadState(data=[], loading=False, error=result.error)
            return

        try:
            rows = [self._row_model.model_validate(row) for row in result.data]
        except ValidationError as e:
            logger.error(f"Invalid row in {table}: {e}")
            self._state = LoadState(
                data=[],
                loading=False,
                error=f"Invalid row in {table}: {e.error_count()} validation error(s)",
            )
            return

        self._state = LoadState(data=rows, loading=False, error=None)


# =============================================================================
# Typed Loaders
# =============================================================================


def profiles_loader(
    gateway: Optional[Gateway], enabled: bool, refresh_token: int = 0
) -> TableDataLoader[Profile]:
    return TableDataLoader(
        gateway, PROFILES_TABLE, Profile, enabled=enabled, refresh_token=refresh_token
    )


def workouts_loader(
    gateway: Optional[Gateway], enabled: bool, refresh_token: int = 0
) -> TableDataLoader[Workout]:
    return TableDataLoader(
        gateway, WORKOUTS_TABLE, Workout, enabled=enabled, refresh_token=refresh_token
    )


def workout_exercises_loader(
    gateway: Optional[Gateway], enabled: bool, refresh_token: int = 0
) -> TableDataLoader[WorkoutExercise]:
    return TableDataLoader(
        gateway,
        WORKOUT_EXERCISES_TABLE,
        WorkoutExercise,
        enabled=enabled,
        refresh_token=refresh_token,
    )


@asynccontextmanager
async def mount_loaders(
    *loaders: TableDataLoader,
) -> AsyncIterator[Tuple[TableDataLoader, ...]]:
    """
    Start sibling loaders together and close them on exit.

    Fetches run concurrently; a failure in one loader only sets that
    loader's error.

    Usage:
        async with mount_loaders(workouts, exercises):
            rows = workouts.state.data
    """
    try:
        await asyncio.gather(*(loader.load() for loader in loaders))
        yield loaders
    finally:
        for loader in loaders:
            loader.close()

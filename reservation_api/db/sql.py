"""
SQL execution facility.

Each call checks one connection out of the engine pool, runs a single
parameterized statement inside its own transaction and gives the
connection back, whether the statement succeeded or raised. Driver
errors are not caught here; callers classify them.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql.elements import ClauseElement

from reservation_api.core.metrics import record_db_operation


class SqlExecutor:
    """Thin async wrapper around an AsyncEngine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def fetch_all(self, statement: ClauseElement, params: Optional[dict[str, Any]] = None) -> list[dict]:
        """Run a query and return every row as a plain dict."""
        record_db_operation("read")
        async with self._engine.connect() as conn:
            result = await conn.execute(statement, params or {})
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, statement: ClauseElement, params: Optional[dict[str, Any]] = None) -> Optional[dict]:
        """Run a query and return the first row, or None when there is none."""
        rows = await self.fetch_all(statement, params)
        return rows[0] if rows else None

    async def insert(self, statement: ClauseElement, params: dict[str, Any]) -> Optional[int]:
        """Run an INSERT ... RETURNING id and return the generated key."""
        record_db_operation("write")
        async with self._engine.begin() as conn:
            result = await conn.execute(statement, params)
            return result.scalar_one_or_none()

    async def execute(self, statement: ClauseElement, params: dict[str, Any]) -> int:
        """Run an UPDATE/DELETE and return the number of affected rows."""
        record_db_operation("write")
        async with self._engine.begin() as conn:
            result = await conn.execute(statement, params)
            return result.rowcount

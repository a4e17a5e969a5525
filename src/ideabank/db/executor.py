"""
Statement execution against the session's open connection.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union
import logging

import psycopg

from ..exceptions import ErrorKind, QueryError
from ..models import OperationResult
from .connector import ConnectionManager

logger = logging.getLogger(__name__)

Row = Dict[str, Any]
Params = Union[Sequence[Any], Dict[str, Any], None]


class QueryExecutor:
    """Runs one statement at a time. Never opens or closes the connection."""

    def __init__(self, manager: ConnectionManager):
        self.manager = manager

    @property
    def status(self):
        return self.manager.status

    def _execute(
        self,
        conn: psycopg.Connection,
        sql: str,
        params: Params,
        is_update: bool,
        on_row: Optional[Callable[[Row], None]],
    ) -> Union[int, List[Row]]:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            if is_update:
                return cur.rowcount
            if on_row is None:
                return list(cur)
            count = 0
            for row in cur:
                on_row(row)
                count += 1
            return count

    def run(
        self,
        sql: str,
        params: Params = None,
        is_update: bool = False,
        on_row: Optional[Callable[[Row], None]] = None,
    ) -> OperationResult:
        """
        Execute a statement with bound parameters.

        Args:
            sql: SQL text with ``%s`` or ``%(name)s`` placeholders.
            params: Values bound to the placeholders.
            is_update: True for insert/update/delete statements.
            on_row: Called with each row dict as it is read. When omitted the
                rows are collected into a list.

        Returns:
            Success carrying the affected row count (updates), the row list,
            or the number of rows handed to ``on_row``. A QUERY failure if the
            statement or the row callback failed; CONNECTION if no connection
            is open.
        """
        with self.manager.lock:
            if not self.manager.is_connected:
                detail = "Not connected to the database."
                self.status.append(detail)
                return OperationResult.failure(ErrorKind.CONNECTION, detail)

            conn = self.manager.connection
            try:
                value = self._execute(conn, sql, params, is_update, on_row)
                conn.commit()
            except psycopg.Error as e:
                self._rollback(conn)
                if conn.closed:
                    return OperationResult.from_error(self.manager.connection_lost(e))
                error = QueryError(f"{type(e).__name__}: {e}", cause=e)
                logger.error(f"Query failed: {error.message}")
                self.status.append(error.message)
                return OperationResult.from_error(error)
            except Exception as e:
                error = QueryError(f"Error while reading results: {e}", cause=e)
                self._rollback(conn)
                logger.exception("Row handler failed")
                self.status.append(error.message)
                return OperationResult.from_error(error)

            return OperationResult.success(value)

    def _rollback(self, conn: psycopg.Connection) -> None:
        try:
            conn.rollback()
        except psycopg.Error as e:
            logger.warning(f"Rollback failed: {e}")

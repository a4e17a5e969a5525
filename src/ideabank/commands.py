"""
Domain commands built on the connection manager and query executor.

Every command disconnects before returning, whatever the outcome.
"""

from typing import Optional
import logging

from .db.connector import ConnectionManager
from .db.executor import QueryExecutor, Row
from .exceptions import ErrorKind, InputValidationError
from .models import OperationResult

logger = logging.getLogger(__name__)

EMPLOYEES_QUERY = "select id, nombre, apellido, profesion from empleado order by id"
IDEAS_QUERY = "select id, ideabrillante from ideabrillante order by id"
INSERT_IDEA = "insert into ideabrillante (ideabrillante) values (%s)"


def format_employee(row: Row) -> str:
    return f"{row['id']:03d} {row['nombre']} {row['apellido']} {row['profesion']}"


def format_idea(row: Row) -> str:
    return f"{row['id']:03d} {row['ideabrillante']}"


class CommandOps:
    def __init__(self, manager: ConnectionManager, executor: QueryExecutor):
        self.manager = manager
        self.executor = executor

    @property
    def status(self):
        return self.manager.status

    def _read_and_log(self, sql: str, formatter) -> OperationResult:
        connected = self.manager.ensure_connected()
        if not connected.ok:
            return connected
        try:
            rows = []

            def collect(row: Row) -> None:
                rows.append(row)
                self.status.append(formatter(row))

            result = self.executor.run(sql, on_row=collect)
            if not result.ok:
                return result
            return OperationResult.success(rows)
        finally:
            self.manager.disconnect()

    def list_employees(self) -> OperationResult:
        """Log one line per employee: zero-padded id, first name, last name, role."""
        with self.manager.lock:
            return self._read_and_log(EMPLOYEES_QUERY, format_employee)

    def list_ideas(self) -> OperationResult:
        with self.manager.lock:
            return self._read_and_log(IDEAS_QUERY, format_idea)

    def _report(self, line: str, verbose: Optional[bool]) -> None:
        with self.status.overridden(verbose):
            self.status.append(line)

    def save_idea(self, text: str, verbose: Optional[bool] = None) -> OperationResult:
        """
        Insert one idea.

        Empty text is rejected before any connection is attempted. Success
        requires exactly one affected row.

        Args:
            text: The idea to store.
            verbose: Overrides the log's verbose flag for the lines this call
                writes itself. Connection messages follow the session flag.
        """
        with self.manager.lock:
            if len(text) == 0:
                error = InputValidationError("Nothing written, there is no idea to save.")
                self._report(error.message, verbose)
                return OperationResult.from_error(error)

            connected = self.manager.ensure_connected()
            if not connected.ok:
                return connected
            try:
                result = self.executor.run(INSERT_IDEA, (text,), is_update=True)
                if result.ok and result.value == 1:
                    logger.info("Idea saved")
                    self._report("The idea has been saved.", verbose)
                    return result
                self._report("Error saving the idea.", verbose)
                if result.ok:
                    return OperationResult.failure(
                        ErrorKind.QUERY, f"Expected 1 affected row, got {result.value}"
                    )
                return result
            finally:
                self.manager.disconnect()

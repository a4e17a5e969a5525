"""
Connection lifecycle for the single database session.
Uses synchronous psycopg3 for simplicity in console context.
"""

from pathlib import Path
from typing import Any, Callable, Optional, Union
import logging
import threading

import psycopg
from psycopg.rows import dict_row

from ..config.loader import load_credentials
from ..config.schema import Credentials
from ..config.settings import settings
from ..exceptions import ConfigError, DBConnectionError
from ..models import ConnectionState, OperationResult
from ..status import StatusLog

logger = logging.getLogger(__name__)


class ConnectionManager:
    """
    Owns the credentials handle and the one live connection.

    The credentials are loaded lazily and dropped whenever a connection
    attempt fails, so the next attempt re-reads the configuration file.
    A normal disconnect keeps them.
    """

    def __init__(
        self,
        config_path: Union[str, Path, None] = None,
        status: Optional[StatusLog] = None,
        connect_timeout: Optional[int] = None,
        statement_timeout: Optional[int] = None,
        connect_fn: Callable[..., Any] = psycopg.connect,
    ):
        self.config_path = Path(config_path or settings.CONFIG_FILE)
        self.status = status if status is not None else StatusLog(settings.VERBOSE)
        self.connect_timeout = settings.CONNECT_TIMEOUT if connect_timeout is None else connect_timeout
        self.statement_timeout = settings.STATEMENT_TIMEOUT if statement_timeout is None else statement_timeout
        self._connect_fn = connect_fn
        self._credentials: Optional[Credentials] = None
        self._conn: Optional[psycopg.Connection] = None
        self.lock = threading.RLock()

    @property
    def state(self) -> ConnectionState:
        return ConnectionState.CONNECTED if self.is_connected else ConnectionState.ABSENT

    @property
    def is_connected(self) -> bool:
        return self._conn is not None and not self._conn.closed

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    @property
    def connection(self) -> psycopg.Connection:
        if self._conn is None:
            raise DBConnectionError("Database not connected. Call ensure_connected() first.")
        return self._conn

    def invalidate(self) -> None:
        """Forget the credentials so the next attempt reloads the config file."""
        with self.lock:
            self._credentials = None

    def connection_lost(self, error: Exception) -> DBConnectionError:
        """
        Drop a handle the server closed mid-statement.

        Treated like a failed connect: the credentials go too, so the next
        attempt re-reads the configuration file.
        """
        with self.lock:
            self._conn = None
            self.invalidate()
            lost = DBConnectionError(f"Lost the database connection: {error}", cause=error)
            logger.error(lost.message)
            self.status.append(lost.message)
            return lost

    def get_or_create_singleton(self) -> OperationResult:
        """
        Return the cached credentials, loading them if needed.

        A missing or unreadable config file is reported in the result and the
        status log; it never raises.
        """
        with self.lock:
            if self._credentials is not None:
                return OperationResult.success(self._credentials)

            try:
                self._credentials = load_credentials(self.config_path)
            except ConfigError as e:
                self._credentials = None
                logger.warning(e.message)
                self.status.append(f"Could not read the configuration file. {e.message}")
                return OperationResult.from_error(e)

            self.status.append(f"Configuration loaded from {self.config_path.resolve()}")
            return OperationResult.success(self._credentials)

    def _open(self, credentials: Credentials) -> psycopg.Connection:
        kwargs = credentials.connect_kwargs()
        kwargs["connect_timeout"] = self.connect_timeout
        if self.statement_timeout:
            kwargs["options"] = f"-c statement_timeout={self.statement_timeout}"
        return self._connect_fn(row_factory=dict_row, **kwargs)

    def ensure_connected(self) -> OperationResult:
        """
        Make sure a connection is open.

        Returns success straight away if one already is. On failure the
        credentials handle is dropped so a retry starts from the config file.
        """
        with self.lock:
            if self._conn is not None:
                if not self._conn.closed:
                    self.status.append("Already connected to the database.")
                    return OperationResult.success(self._conn)
                logger.warning("Connection was closed by the server, reconnecting")
                self._conn = None

            loaded = self.get_or_create_singleton()
            if not loaded.ok:
                return loaded
            credentials = loaded.value

            try:
                self._conn = self._open(credentials)
            except psycopg.Error as e:
                self._conn = None
                self.invalidate()
                error = DBConnectionError(f"Could not connect to the database at {credentials.url}: {e}", cause=e)
                logger.error(error.message)
                self.status.append(error.message)
                return OperationResult.from_error(error)

            logger.info(f"Connected to {credentials.url}")
            self.status.append("Connected to the database.")
            return OperationResult.success(self._conn)

    def disconnect(self) -> OperationResult:
        """Close the connection if there is one. Best effort, never raises."""
        with self.lock:
            if self._conn is None:
                self.status.append("There is no database connection to close.")
                return OperationResult.success(ConnectionState.ABSENT)

            conn, self._conn = self._conn, None
            try:
                conn.close()
            except psycopg.Error as e:
                logger.warning(f"Error closing connection: {e}")
                self.status.append(f"Problems closing the database connection. {e}")
                return OperationResult.success(ConnectionState.ABSENT, detail=str(e))

            logger.info("Database connection closed")
            self.status.append("Closed the database connection.")
            return OperationResult.success(ConnectionState.ABSENT)


"""
The client session: one status log, one connection manager, one executor.

Construct a Session once at startup and pass it to whatever needs the
database. ``get_session()`` keeps a default instance for the console.
"""

from pathlib import Path
from typing import Any, Callable, Optional, Union
import logging

import psycopg

from .commands import CommandOps
from .config.settings import settings
from .db.connector import ConnectionManager
from .db.executor import QueryExecutor
from .models import ConnectionState, OperationResult
from .status import StatusLog

logger = logging.getLogger(__name__)


class Session:
    """Single logical client session against the ideas database."""

    def __init__(
        self,
        config_path: Union[str, Path, None] = None,
        verbose: Optional[bool] = None,
        connect_timeout: Optional[int] = None,
        statement_timeout: Optional[int] = None,
        connect_fn: Callable[..., Any] = psycopg.connect,
    ):
        self.status = StatusLog(settings.VERBOSE if verbose is None else verbose)
        self.manager = ConnectionManager(
            config_path=config_path,
            status=self.status,
            connect_timeout=connect_timeout,
            statement_timeout=statement_timeout,
            connect_fn=connect_fn,
        )
        self.executor = QueryExecutor(self.manager)
        self.commands = CommandOps(self.manager, self.executor)
        logger.debug(f"Session created for config file {self.manager.config_path}")

    @property
    def state(self) -> ConnectionState:
        return self.manager.state

    def ensure_connected(self) -> OperationResult:
        return self.manager.ensure_connected()

    def disconnect(self) -> OperationResult:
        return self.manager.disconnect()

    def list_employees(self) -> OperationResult:
        return self.commands.list_employees()

    def list_ideas(self) -> OperationResult:
        return self.commands.list_ideas()

    def save_idea(self, text: str, verbose: Optional[bool] = None) -> OperationResult:
        return self.commands.save_idea(text, verbose=verbose)

    def run(self, sql: str, params=None, is_update: bool = False, on_row=None) -> OperationResult:
        """Run an arbitrary statement; the caller must connect and disconnect."""
        return self.executor.run(sql, params, is_update=is_update, on_row=on_row)

    def clear_log(self) -> None:
        self.status.clear()

    def set_verbose(self, verbose: bool) -> None:
        self.status.set_verbose(verbose)

    def read_log(self) -> str:
        return self.status.read()


_default_session: Optional[Session] = None


def get_session(**kwargs) -> Session:
    """
    Return the process default session, creating it on first use.

    Keyword arguments only apply when the session is created.
    """
    global _default_session
    if _default_session is None:
        _default_session = Session(**kwargs)
    elif kwargs:
        logger.warning(
            f"Default session already exists, ignoring arguments: {', '.join(sorted(kwargs))}. "
            "Call reset_session() first to rebuild it."
        )
    return _default_session


def reset_session() -> None:
    """Drop the default session (closing its connection)."""
    global _default_session
    if _default_session is not None:
        _default_session.disconnect()
    _default_session = None

from .session import Session, get_session, reset_session
from .commands import CommandOps
from .db import ConnectionManager, QueryExecutor
from .status import StatusLog
from .models import ConnectionState, OperationResult
from .exceptions import (
    ErrorKind,
    IdeaBankError,
    ConfigError,
    DBConnectionError,
    QueryError,
    InputValidationError,
)
from .config import Credentials, load_credentials

__version__ = "0.1.0"

__all__ = [
    "Session",
    "get_session",
    "reset_session",
    "CommandOps",
    "ConnectionManager",
    "QueryExecutor",
    "StatusLog",
    "ConnectionState",
    "OperationResult",
    "ErrorKind",
    "IdeaBankError",
    "ConfigError",
    "DBConnectionError",
    "QueryError",
    "InputValidationError",
    "Credentials",
    "load_credentials",
]

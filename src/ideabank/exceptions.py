from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed operation."""
    CONFIG = "config"
    CONNECTION = "connection"
    QUERY = "query"
    VALIDATION = "validation"


class IdeaBankError(Exception):
    """Base exception for ideabank"""
    kind: ErrorKind = None

    def __init__(self, message: str, cause: Exception = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class ConfigError(IdeaBankError):
    """Raised when the configuration file is missing or unreadable"""
    kind = ErrorKind.CONFIG


class DBConnectionError(IdeaBankError):
    """Raised when a connection cannot be established (auth, network, timeout)"""
    kind = ErrorKind.CONNECTION


class QueryError(IdeaBankError):
    """Raised when a statement fails to execute"""
    kind = ErrorKind.QUERY


class InputValidationError(IdeaBankError):
    """Raised when user input is rejected before any I/O"""
    kind = ErrorKind.VALIDATION

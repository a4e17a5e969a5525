from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict

from .exceptions import ErrorKind, IdeaBankError


class ConnectionState(str, Enum):
    ABSENT = "absent"
    CONNECTED = "connected"


class OperationResult(BaseModel):
    """Outcome of a session operation: success value or tagged error."""
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    kind: Optional[ErrorKind] = None
    detail: str = ""
    value: Any = None

    @classmethod
    def success(cls, value: Any = None, detail: str = "") -> "OperationResult":
        return cls(ok=True, value=value, detail=detail)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str) -> "OperationResult":
        return cls(ok=False, kind=kind, detail=detail)

    @classmethod
    def from_error(cls, error: IdeaBankError) -> "OperationResult":
        return cls.failure(error.kind, error.message)

    def __bool__(self) -> bool:
        return self.ok

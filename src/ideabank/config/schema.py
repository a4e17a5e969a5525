"""
Credential schema for the database connection.

Only shape is enforced here. Empty or wrong values are left for the server
to reject when the connection is opened.
"""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, field_validator
import os
import re


PROTOCOL = "postgresql://"


def expand_env_vars(value: str) -> str:
    """Expand ${VAR} patterns in string with environment variable values."""
    pattern = r'\$\{([^}]+)\}'

    def replacer(match):
        var_name = match.group(1)
        return os.environ.get(var_name, match.group(0))

    return re.sub(pattern, replacer, value)


class Credentials(BaseModel):
    """Connection parameters read from the configuration file."""
    model_config = ConfigDict(frozen=True, extra='ignore')

    host: str = ""
    database: str = ""
    user: str = ""
    password: str = ""
    port: int = 5432

    @field_validator("host", "database", "user", "password", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("password")
    @classmethod
    def _expand_password(cls, value: str) -> str:
        return expand_env_vars(value) if value else value

    @classmethod
    def from_mapping(cls, raw: Dict[str, Any]) -> "Credentials":
        """Build from a HOST/DATABASE/USER/PASSWORD mapping, keys in any case."""
        normalized = {str(k).strip().lower(): v for k, v in raw.items()}
        if normalized.get("port") in (None, ""):
            normalized.pop("port", None)
        return cls(**normalized)

    @property
    def url(self) -> str:
        """Connection URL without the password, safe to log."""
        netloc = self.host if self.port == 5432 else f"{self.host}:{self.port}"
        return f"{PROTOCOL}{netloc}/{self.database}"

    def connect_kwargs(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.user,
            "password": self.password,
        }

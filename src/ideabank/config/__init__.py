from .loader import load_credentials
from .schema import Credentials, expand_env_vars, PROTOCOL
from .settings import Settings, settings

__all__ = [
    "load_credentials",
    "Credentials",
    "expand_env_vars",
    "PROTOCOL",
    "Settings",
    "settings",
]

import os


class Settings:
    @property
    def CONFIG_FILE(self) -> str:
        return os.getenv("IDEABANK_CONFIG_FILE", "dbprops.txt")

    @property
    def CONNECT_TIMEOUT(self) -> int:
        """Seconds to wait for the server when opening a connection."""
        return int(os.getenv("IDEABANK_CONNECT_TIMEOUT", "10"))

    @property
    def STATEMENT_TIMEOUT(self) -> int:
        """Milliseconds before a statement is cancelled; 0 keeps the server default."""
        return int(os.getenv("IDEABANK_STATEMENT_TIMEOUT", "0"))

    @property
    def VERBOSE(self) -> bool:
        return os.getenv("IDEABANK_VERBOSE", "true").lower() in ("true", "1", "yes")

    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("IDEABANK_LOG_LEVEL", "WARNING").upper()


settings = Settings()

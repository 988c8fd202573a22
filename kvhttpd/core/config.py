"""
Environment-driven settings.
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the service process.

    Environment variables:
        HOST: bind host (default: "0.0.0.0")
        PORT: bind port (default: 8000)
        STORAGE_TYPE: "memory" or "sqlite" (default: "memory")
        STORAGE_DB_PATH: SQLite database file (default: "kvhttpd.db")
        LOG_LEVEL: root log level (default: "INFO")
    """
    host: str = "0.0.0.0"
    port: int = 8000
    storage_type: str = "memory"
    storage_db_path: str = "kvhttpd.db"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, reading .env if present."""
        load_dotenv()
        return cls(
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
            storage_type=os.getenv("STORAGE_TYPE", cls.storage_type).lower(),
            storage_db_path=os.getenv("STORAGE_DB_PATH", cls.storage_db_path),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"

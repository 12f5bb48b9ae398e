"""Configuration for dunnet."""

import os
from dataclasses import dataclass
from pathlib import Path


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    database_url: str = "sqlite:///./dunnet.db"
    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from DUNNET_* environment variables."""
        certfile = os.getenv("DUNNET_CERTFILE")
        keyfile = os.getenv("DUNNET_KEYFILE")
        log_file = os.getenv("DUNNET_LOG_FILE")
        seed = os.getenv("DUNNET_SEED")

        return cls(
            database_url=os.getenv("DUNNET_DATABASE_URL", cls.database_url),
            host=os.getenv("DUNNET_HOST", cls.host),
            port=int(os.getenv("DUNNET_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("DUNNET_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=_flag("DUNNET_JSON_LOGS", False),
            hash_fingerprints=_flag("DUNNET_HASH_FINGERPRINTS", True),
            seed=int(seed) if seed else None,
        )

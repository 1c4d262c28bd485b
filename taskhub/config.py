"""Runtime settings, read from the environment (and a local .env file)."""
from dataclasses import dataclass
import os

from dotenv import load_dotenv

load_dotenv()

SUPPORTED_TRANSPORTS = ("stdio", "sse", "streamable-http")


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Server settings; defaults give a private in-memory database over stdio."""
    database_url: str = "sqlite://"
    seed_sample_data: bool = True
    server_name: str = "taskhub-mcp-server"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    elicitation_timeout_seconds: float = 300.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.environ.get("DATABASE_URL", cls.database_url),
            seed_sample_data=_env_bool("SEED_SAMPLE_DATA", cls.seed_sample_data),
            server_name=os.environ.get("MCP_SERVER_NAME", cls.server_name),
            transport=os.environ.get("MCP_TRANSPORT", cls.transport).strip().lower(),
            host=os.environ.get("MCP_HOST", cls.host),
            port=int(os.environ.get("MCP_PORT", cls.port)),
            elicitation_timeout_seconds=float(
                os.environ.get("ELICITATION_TIMEOUT_SECONDS", cls.elicitation_timeout_seconds)
            ),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()

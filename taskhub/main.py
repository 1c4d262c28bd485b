"""Entry point: build the store and serve it over the configured MCP transport."""
import logging

from taskhub.config import SUPPORTED_TRANSPORTS, Settings, get_settings
from taskhub.db import create_db_engine, init_db, seed_sample_data
from taskhub.logging_config import configure_logging
from taskhub.mcp.server import build_server
from taskhub.services.store import Store

logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> Store:
    """Create a fresh schema and, unless disabled, load the sample data."""
    engine = create_db_engine(settings.database_url)
    init_db(engine)

    store = Store(engine)
    if settings.seed_sample_data:
        seed_sample_data(store.session)
    return store


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    if settings.transport not in SUPPORTED_TRANSPORTS:
        raise ValueError(
            f"Unsupported MCP_TRANSPORT {settings.transport!r}; "
            f"expected one of {', '.join(SUPPORTED_TRANSPORTS)}"
        )

    store = create_store(settings)
    try:
        server = build_server(store, settings)
        logger.info(f"Starting {settings.server_name} over {settings.transport}")
        server.run(transport=settings.transport)
    finally:
        store.close()


if __name__ == "__main__":
    main()

"""
Entry point: serve a configured store over HTTP.
"""
import logging
from kvhttpd.core.config import Settings
from kvhttpd.service import Service
from kvhttpd.store.factory import create_store

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = create_store(settings)
    logger.info(f"Using {settings.storage_type} store, listening on {settings.addr}")
    Service(settings.addr, store, log_level=settings.log_level).serve_forever()


if __name__ == "__main__":
    main()

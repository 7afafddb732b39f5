import logging

import uvicorn

from tablebook.infrastructure.config import settings
from tablebook.infrastructure.logging_config import configure_logging

log = logging.getLogger(__name__)


def main() -> None:
    configure_logging(settings.log_level)

    server = uvicorn.Server(
        uvicorn.Config(
            "tablebook.main:app",
            host=settings.host,
            port=settings.port,
            log_config=None,
        )
    )
    log.info("Server starting at http://%s:%d/", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    main()

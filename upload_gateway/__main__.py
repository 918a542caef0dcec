import logging

import uvicorn

from upload_gateway.core.config import get_settings
from upload_gateway.core.logging_config import setup_logging

logger = logging.getLogger("upload_gateway")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Image upload server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "upload_gateway.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()

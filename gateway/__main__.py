"""Run the Utility Gateway with uvicorn: ``python -m gateway``."""

import logging

import uvicorn

from gateway.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run("gateway.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

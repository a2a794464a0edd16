"""Run the party service: ``python -m ras_party``."""
from __future__ import annotations

import uvicorn

from ras_party.api.app import create_app
from ras_party.observability.logging import JsonLoggerFactory, get_logger
from ras_party.settings import load_settings


def main() -> None:
    settings = load_settings()
    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    get_logger(__name__).info("party.config", service_name=settings.service_name, port=settings.port)
    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

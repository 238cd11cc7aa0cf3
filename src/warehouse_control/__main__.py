"""Run the API server: ``python -m warehouse_control``."""

from __future__ import annotations

import uvicorn

from warehouse_control.app import create_app
from warehouse_control.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

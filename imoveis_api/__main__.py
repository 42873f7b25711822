"""Run the API with uvicorn: ``python -m imoveis_api``."""
from __future__ import annotations

import uvicorn

from imoveis_api.core.config import get_settings
from imoveis_api.core.logging import setup_logging


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    from imoveis_api.app import create_app

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()

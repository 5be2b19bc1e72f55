"""Run the Patrol API with uvicorn: ``python -m patrol``."""
from __future__ import annotations

import uvicorn

from patrol.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "patrol.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

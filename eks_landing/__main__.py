from __future__ import annotations

import uvicorn

from eks_landing.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "eks_landing.main:app",
        host=settings.host,
        port=settings.port,
        access_log=False,
        log_config=None,
    )


if __name__ == "__main__":
    main()

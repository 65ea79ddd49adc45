"""Run the API with uvicorn: ``python -m wishlist``."""

import uvicorn

from wishlist.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "wishlist.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

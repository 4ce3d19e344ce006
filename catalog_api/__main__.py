"""Run the API with uvicorn: python -m catalog_api"""

import uvicorn

from catalog_api.config import settings


def main() -> None:
    uvicorn.run(
        "catalog_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

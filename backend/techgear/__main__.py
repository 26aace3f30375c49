"""Run the API with uvicorn: ``python -m techgear``."""

import uvicorn

from techgear.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("techgear.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

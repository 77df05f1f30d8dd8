"""Run the API with ``python -m ecosort``."""

import uvicorn

from ecosort.setup.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("ecosort.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()

"""Local entrypoint serving the API with uvicorn."""

import uvicorn

from culinary_companion.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "culinary_companion.api.asgi:app", host=settings.host, port=settings.port
    )


if __name__ == "__main__":
    main()

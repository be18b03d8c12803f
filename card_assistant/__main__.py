"""Run the API with uvicorn: python -m card_assistant."""

import uvicorn

from card_assistant.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "card_assistant.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()

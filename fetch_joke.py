"""Fetch one dad joke from the command line using the service's client."""

import sys

from app.config import settings
from app.core.exceptions import JokeServiceError
from app.core.http import create_http_session
from app.core.logger import setup_logger
from app.services.jokes import JokeClient


def main() -> int:
    setup_logger(settings.log_level)
    with create_http_session(settings) as session:
        client = JokeClient(session, url=settings.joke_api_url, timeout=settings.joke_api_timeout)
        try:
            joke = client.fetch_joke()
        except JokeServiceError as exc:
            print(f"error: {exc.message}", file=sys.stderr)
            return 1
    print(joke.joke or "No joke found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging

import requests
from fastapi import Request

from app import schemas
from app.core.exceptions import requests_error_handler

logger = logging.getLogger(__name__)


class JokeClient:
    """Fetches jokes from the upstream joke API over a shared session.

    The client keeps no per-request state, so one instance serves every
    inbound request. Nothing is cached: each ``fetch_joke`` call is one
    outbound GET.
    """

    def __init__(self, session: requests.Session, url: str, timeout: float):
        self.session = session
        self.url = url
        self.timeout = timeout

    @requests_error_handler
    def fetch_joke(self) -> schemas.JokeResponse:
        logger.debug("GET %s", self.url)
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return schemas.JokeResponse.model_validate(response.json())


def get_joke_client(request: Request) -> JokeClient:
    return request.app.state.joke_client

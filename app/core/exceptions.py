import logging
from functools import wraps

import requests
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class JokeServiceError(Exception):
    status_code = 502

    def __init__(self, message: str, source: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.source = source


class UpstreamTimeoutError(JokeServiceError):
    status_code = 504


class UpstreamConnectionError(JokeServiceError):
    pass


class UpstreamStatusError(JokeServiceError):
    pass


class UpstreamPayloadError(JokeServiceError):
    pass


def requests_error_handler(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        # ConnectTimeout is also a ConnectionError
        except requests.Timeout as e:
            error = UpstreamTimeoutError("Joke API timed out", e)
        except requests.ConnectionError as e:
            error = UpstreamConnectionError("Could not reach the joke API", e)
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            error = UpstreamStatusError(f"Joke API request failed (status: {status})", e)
        except requests.exceptions.JSONDecodeError as e:
            error = UpstreamPayloadError("Joke API returned a body that is not JSON", e)
        except ValidationError as e:
            error = UpstreamPayloadError("Joke API returned an unexpected body", e)
        # Propagate already handled exception
        except JokeServiceError:
            raise
        except requests.RequestException as e:
            error = JokeServiceError("Joke API request failed", e)
        logger.warning("%s: %r", error.message, error.source)
        raise error from error.source

    return wrapper

import requests

from app.config import Settings


def create_http_session(settings: Settings) -> requests.Session:
    """Build the one session shared by every outbound call of the process."""
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
    )
    return session

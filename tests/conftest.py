import pytest
import requests
import responses
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.core.http import create_http_session
from app.main import create_app

JOKE_API_URL = "https://icanhazdadjoke.com/"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        app_name="Dad Joke API (test)",
        joke_api_url=JOKE_API_URL,
        joke_api_timeout=2.5,
        user_agent="dadjoke-api tests",
    )


@pytest.fixture
def http_session(settings):
    session = create_http_session(settings)
    yield session
    session.close()


@pytest.fixture
def upstream():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def app(settings, http_session):
    return create_app(settings, session=http_session)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def connection_refused():
    return requests.ConnectionError("Connection refused")

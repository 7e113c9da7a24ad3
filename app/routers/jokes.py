from fastapi import APIRouter, Depends

from app import schemas
from app.services.jokes import JokeClient, get_joke_client

router = APIRouter(prefix="/joke", tags=["jokes"])


def get_joke(client: JokeClient = Depends(get_joke_client)):
    return client.fetch_joke()


router.add_api_route("", get_joke, methods=["GET"], response_model=schemas.JokeResponse)

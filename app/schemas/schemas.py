from typing import Optional

from pydantic import BaseModel, ConfigDict


class JokeResponse(BaseModel):
    # Upstream also sends "id" and "status"; only the joke is exposed
    model_config = ConfigDict(extra="ignore")
    joke: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    app: str

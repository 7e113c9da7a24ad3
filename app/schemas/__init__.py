from app.schemas.schemas import HealthResponse, JokeResponse

__all__ = ["HealthResponse", "JokeResponse"]

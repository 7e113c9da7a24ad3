from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Dad Joke API"
    joke_api_url: str = "https://icanhazdadjoke.com/"
    # Seconds; applies to both connect and read
    joke_api_timeout: float = 10.0
    user_agent: str = "dadjoke-api (https://github.com/dadjoke-api)"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()

from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


class Config(BaseSettings):
    db_url: str
    env: Literal["prod", "dev"] = "prod"

    # OpenAI, battles fall back to the stat calculator when unset
    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"
    openai_timeout: float = 30.0

    # PokeAPI
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout: float = 10.0

    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:3001"]

    @property
    def is_dev(self) -> bool:
        return self.env == "dev"


load_dotenv()
settings = Config()  # pyright: ignore[reportCallIssue]

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # mongodb://host:port/dbname, the path is the database name
    host: str = "127.0.0.1"
    port: int = 3003
    debug: bool = False
    cors_origins: list[str] = []
    database_timeout_ms: int = 5000  # Server selection timeout, requests fail instead of hanging

    model_config = {
        "env_file": [".env"],
        "env_prefix": "BLOGLIST_",
        "extra": "ignore",
    }

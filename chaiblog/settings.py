import urllib.parse
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Hashnode
    HASHNODE_GQL_URI: str = "https://gql.hashnode.com"
    HASHNODE_PUBLICATION_HOST: str = "satpalsinhrana.hashnode.dev"
    HASHNODE_FULL_URL: str = "https://satpalsinhrana.hashnode.dev"
    HASHNODE_TIMEOUT_SECONDS: float = 10.0

    # Public host shown in suggested curl commands
    HOST: str = "localhost:8000"

    # Server
    BIND_ADDRESS: str = "0.0.0.0"
    PORT: int = 8000

    # Rendering
    POSTS_LIMIT: int = 20
    RENDER_WIDTH: int = 100
    TERMINAL_AGENT_MARKER: str = "curl"

    # Logging
    LOG_LEVEL: str = "INFO"

    def post_url(self, slug: str) -> str:
        return f"{self.HASHNODE_FULL_URL}/{urllib.parse.quote(slug, safe='')}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()

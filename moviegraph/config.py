from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Neo4j
    NEO4J_URI: str = "neo4j+s://demo.neo4jlabs.com"
    NEO4J_USER: str = "movies"
    NEO4J_PASSWORD: str = "movies"
    NEO4J_DATABASE: str = "movies"
    NEO4J_VERSION: str = Field(default="4", description="Database name is only sent to 4.x servers")
    NEO4J_MAX_POOL_SIZE: int = 50

    # HTTP
    PORT: int = 8080

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = Field(default="json", description="'json' for production, 'console' for dev")

    @property
    def neo4j_database(self) -> str | None:
        """Target database, or None to let the server pick its default."""
        if not self.NEO4J_VERSION.startswith("4"):
            return None
        return self.NEO4J_DATABASE or None


def get_settings() -> Settings:
    return Settings()

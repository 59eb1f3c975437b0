"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from securitytxt.application.dto.parser_options import ParserOptions


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parsing
    require_https: bool = Field(
        default=False,
        description="Reject URL fields whose scheme is not https",
    )
    skip_blank_lines: bool = Field(
        default=False,
        description="Ignore blank lines instead of reporting them as malformed fields",
    )
    trim_language_tags: bool = Field(
        default=False,
        description="Strip whitespace around Preferred-Languages tags",
    )

    # Served at /.well-known/security.txt
    security_txt_path: str | None = Field(
        default=None,
        description="security.txt file served at the well-known path",
    )

    # HTTP API
    api_host: str = Field(default="0.0.0.0", description="API bind address")
    api_port: int = Field(default=8000, description="API port")

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    def parser_options(self) -> ParserOptions:
        """Build parser options from the parsing settings."""
        return ParserOptions(
            require_https=self.require_https,
            skip_blank_lines=self.skip_blank_lines,
            trim_language_tags=self.trim_language_tags,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

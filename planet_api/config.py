"""Pydantic Settings loaded from environment."""
from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_username: str = ""
    mongo_password: str = ""
    mongo_database: str = "test"  # Used only when MONGO_URI carries no database path
    mongo_collection: str = "planets"
    mongo_server_selection_timeout_ms: int = 5000
    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    serverless: bool = False
    aws_lambda_function_name: str = ""
    static_dir: str = "."
    cors_origins: str = "*"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        # logging only accepts upper-case level names
        return v.strip().upper()

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def in_function_environment(self) -> bool:
        """True when a managed function runtime invokes the app directly."""
        return self.serverless or bool(self.aws_lambda_function_name)


def get_settings(request: Request) -> Settings:
    """FastAPI dependency: settings the app was built with."""
    return request.app.state.settings


settings = Settings()

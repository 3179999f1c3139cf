from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic Settings.
    Reads from DELIVERY_FEE_* environment variables and an optional .env file.
    """

    # Application Config
    log_level: str = "INFO"
    log_dir: str = "/var/log/delivery_fee"

    # Database Config
    postgres_user: str = "delivery_fee"
    postgres_password: str = "delivery_fee"
    postgres_db: str = "delivery_fee"
    postgres_host: str = "db"
    postgres_port: int = Field(default=5432, ge=1, le=65535)
    sqlite_path: str | None = Field(default=None, description="Use a SQLite file instead of Postgres")
    db_connect_retries: int = Field(default=3, ge=1, description="Connection attempts before giving up")
    db_connect_delay: float = Field(default=1.0, ge=0, description="Seconds between connection attempts")

    # Reference Data
    reference_data_file: Path | None = Field(
        default=None, description="YAML file with stations, vehicles and fee tables"
    )
    seed_on_startup: bool = False

    model_config = SettingsConfigDict(
        env_prefix="DELIVERY_FEE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @computed_field
    def database_url(self) -> str:
        if self.sqlite_path:
            return f"sqlite:///{self.sqlite_path}"
        return f"postgresql://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"


# Global settings instance
settings = Settings()

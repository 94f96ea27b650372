"""Library configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Geo field defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOFIELD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Path used when the caller does not name one
    default_path: str = "location"

    # Spatial index applied when the caller does not pass one
    default_index_type: str = "2dsphere"
    default_index_sparse: bool = True

    def default_index(self) -> dict:
        """Build a fresh default index specification."""
        return {"type": self.default_index_type, "sparse": self.default_index_sparse}


settings = Settings()

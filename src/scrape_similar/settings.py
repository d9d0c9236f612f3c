from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Manages engine settings using Pydantic.
    It automatically loads variables from a .env file.
    """

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    # --- Document parsing ---
    DEFAULT_ENCODING: str = "utf-8"

    # --- Limits applied by the HTTP/CLI surfaces, never by the core ---
    MAX_DOCUMENT_BYTES: int = 5 * 1024 * 1024
    MAX_MATCHES: int = 10_000  # 0 disables the bound

    model_config = SettingsConfigDict(
        env_prefix="SCRAPE_SIMILAR_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


# Create a single, reusable instance of the settings
settings = Settings()

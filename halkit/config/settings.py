from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Serialization defaults managed by Pydantic.
    Reads HALKIT_* environment variables and/or .env file.
    """
    # JSON text output
    JSON_INDENT: int | None = None

    # XML output (line breaks only when pretty and an indent is known)
    XML_INDENT: str | None = None
    XML_PRETTY: bool = False

    # Media types
    HAL_JSON_MEDIA_TYPE: str = "application/hal+json"
    HAL_XML_MEDIA_TYPE: str = "application/hal+xml"

    model_config = SettingsConfigDict(
        env_prefix="HALKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()

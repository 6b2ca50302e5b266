from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatapackConfig(BaseSettings):
    """Configuration for datapack packaging."""

    pack_format: int = 26
    output_dir: Path = Path("dist")

    model_config = SettingsConfigDict(env_prefix="DATAPACK_", env_file=".env")


class ServerConfig(BaseSettings):
    """Configuration for the HTTP server."""

    host: str = "127.0.0.1"
    port: int = 8000

    model_config = SettingsConfigDict(env_prefix="SERVER_", env_file=".env")


class AppConfig(BaseSettings):
    """Main application configuration."""
    datapack_config: DatapackConfig = DatapackConfig()
    server_config: ServerConfig = ServerConfig()

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

# fsbox/config.py
from pathlib import Path
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Filesystem sandbox
    SANDBOX_ROOT: Path = Path("./.sandbox")

    # Byte streaming
    COPY_CHUNK_SIZE: int = 64 * 1024

    # MCP host
    MCP_SERVER_NAME: str = "FsBox"

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2vector_env: str = "development"
    svg2vector_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Conversion
    default_scale_factor: float = 1.0
    preserve_group_indent: bool = True

    # Content retrieval
    fetch_timeout_seconds: float = 30.0
    max_svg_bytes: int = 5 * 1024 * 1024
    allow_remote_sources: bool = False

    # /api/convert/file reads below input_root and writes below output_root
    input_root: Path = Path(".")
    output_root: Path = Path(".")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

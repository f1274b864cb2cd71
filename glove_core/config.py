"""
glove_core/config.py
--------------------
Runtime configuration for the GloVe service.

Defaults reproduce the published layout (archive under /tmp, Stanford URL).
Any field can be overridden with a GLOVE_-prefixed environment variable,
e.g. GLOVE_WORK_DIR=/data/glove.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GLOVE_URL = "https://nlp.stanford.edu/data/glove.6B.zip"
GLOVE_ZIP = "glove.6B.zip"
AVAILABLE_DIMENSIONS = (50, 100, 200, 300)


class GloVeSettings(BaseSettings):
    work_dir: Path = Path("/tmp")
    archive_url: str = GLOVE_URL
    archive_name: str = GLOVE_ZIP
    expected_sha256: Optional[str] = Field(None, description="Hex digest checked after download")
    download_timeout: Optional[float] = None     # seconds; None waits forever
    chunk_size: int = 1 << 20
    show_progress: bool = True
    log_dir: Path = Path("logs")
    log_to_file: bool = True

    model_config = SettingsConfigDict(env_prefix="GLOVE_")


@lru_cache(maxsize=1)
def get_settings() -> GloVeSettings:
    return GloVeSettings()

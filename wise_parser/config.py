"""Environment-driven settings for the statement importer."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB


@dataclass(frozen=True)
class Settings:
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    log_dir: Path = Path("logs")
    log_level: str = "INFO"


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Call ``load_dotenv()`` first to pick up a ``.env`` file.
    """
    return Settings(
        max_file_size=int(os.getenv("WISE_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE)),
        log_dir=Path(os.getenv("WISE_LOG_DIR", "logs")),
        log_level=os.getenv("WISE_LOG_LEVEL", "INFO").upper(),
    )

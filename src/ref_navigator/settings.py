import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    encoding: str = "utf-8"
    hover_max_length: int = 280


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("REF_NAVIGATOR_LOG_LEVEL", "WARNING").upper(),
        encoding=os.getenv("REF_NAVIGATOR_ENCODING", "utf-8"),
        hover_max_length=int(os.getenv("REF_NAVIGATOR_HOVER_MAX_LENGTH", "280")),
    )

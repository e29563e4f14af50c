import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str
    threshold: float
    pixel_size: int
    mode: str
    color_mode: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            threshold=float(os.getenv("DITHER_THRESHOLD", "128")),
            pixel_size=int(os.getenv("DITHER_PIXEL_SIZE", "1")),
            mode=os.getenv("DITHER_MODE", "dither-bayer").lower(),
            color_mode=os.getenv("DITHER_COLOR_MODE", "grayscale").lower(),
        )


SETTINGS = Settings.from_env()


def configure_logging(settings: Settings = SETTINGS) -> logging.Logger:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return logging.getLogger("monodither")

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..constants import COLOR_MODES, PROCESSING_MODES, ColorMode, ProcessingMode


@dataclass(frozen=True)
class ProcessingParams:
    """Configuration for one pipeline run."""

    mode: ProcessingMode = 'dither-bayer'
    threshold: float = 128.0
    pixel_size: int = 1
    color_mode: ColorMode = 'grayscale'
    custom_white: Optional[str] = None
    custom_grey: Optional[str] = None
    custom_black: Optional[str] = None

    def __post_init__(self) -> None:
        if self.mode not in PROCESSING_MODES:
            raise ValueError(f"Unknown processing mode: {self.mode}")
        if self.color_mode not in COLOR_MODES:
            raise ValueError(f"Unknown color mode: {self.color_mode}")

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "ProcessingParams":
        """Build from a request mapping using the camelCase message keys."""
        return cls(
            mode=params.get('mode', 'dither-bayer'),
            threshold=float(params.get('threshold', 128.0)),
            pixel_size=int(params.get('pixelSize', 1)),
            color_mode=params.get('colorMode', 'grayscale'),
            custom_white=params.get('customWhite'),
            custom_grey=params.get('customGrey'),
            custom_black=params.get('customBlack'),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'mode': self.mode,
            'threshold': self.threshold,
            'pixelSize': self.pixel_size,
            'colorMode': self.color_mode,
        }
        for key, value in (
            ('customWhite', self.custom_white),
            ('customGrey', self.custom_grey),
            ('customBlack', self.custom_black),
        ):
            if value is not None:
                data[key] = value
        return data

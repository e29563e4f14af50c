import re
from typing import NamedTuple, Optional, Tuple
import numpy as np
import numpy.typing as npt

from ..constants import CHANNELS, COLOR_GATES, OPAQUE, BaseColorMode, ColorMode
from ..core.utils import as_rgba, round_half_up
from ..errors import InvalidColorSpec

ColorSpec = Tuple[int, int, int]

_HEX_COLOR = re.compile(r'[0-9a-fA-F]{6}')


class CustomColors(NamedTuple):
    """Resolved colors for the 'custom' color mode."""
    white: ColorSpec
    grey: ColorSpec
    black: ColorSpec


def parse_hex_color(value: str) -> ColorSpec:
    """
    Parse 'RRGGBB' or '#RRGGBB' into an (r, g, b) tuple.

    Raises:
        InvalidColorSpec: if the value is not exactly six hex digits.
    """
    if not isinstance(value, str):
        raise InvalidColorSpec(value)
    digits = value[1:] if value.startswith('#') else value
    if not _HEX_COLOR.fullmatch(digits):
        raise InvalidColorSpec(value)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def get_color_rgb(mode: BaseColorMode, brightness: int) -> ColorSpec:
    """Fixed-hue mapping of a single brightness value; unknown modes map to grayscale."""
    gate = COLOR_GATES.get(mode, COLOR_GATES['grayscale'])
    return (brightness * gate[0], brightness * gate[1], brightness * gate[2])


def apply_color_mode(
    buffer: npt.ArrayLike,
    width: int,
    height: int,
    color_mode: ColorMode,
    custom_colors: Optional[CustomColors] = None
) -> npt.NDArray[np.uint8]:
    """
    Map the brightness of each pixel to an RGB color.

    The red channel is read as brightness (the image is grayscale or binary
    by the time it gets here).

    Fixed modes gate channels, e.g. red -> (b, 0, 0). In 'custom' mode,
    brightness 255 maps to the white color and 0 to the black color; any
    other brightness scales the grey color by b / 255. The grey color is
    never blended with white or black. 'custom' without colors falls back
    to grayscale.

    Args:
        buffer: Flat RGBA buffer.
        width: Image width in pixels.
        height: Image height in pixels.
        color_mode: One of the fixed hues, 'grayscale' or 'custom'.
        custom_colors: Parsed colors, required for the custom mapping.

    Returns:
        New flat RGBA uint8 buffer with opaque alpha.
    """
    rgba = as_rgba(buffer, width, height)
    brightness = rgba[:, :, 0].astype(np.int64)

    out = np.empty((height, width, CHANNELS), dtype=np.uint8)

    if color_mode == 'custom' and custom_colors is not None:
        is_white = brightness == 255
        is_black = brightness == 0
        factor = brightness.astype(float) / 255.0
        for i in range(3):
            scaled_grey = round_half_up(custom_colors.grey[i] * factor)
            channel_data = np.where(is_white, custom_colors.white[i], scaled_grey)
            channel_data = np.where(is_black, custom_colors.black[i], channel_data)
            out[:, :, i] = channel_data.astype(np.uint8)
    else:
        gate = COLOR_GATES.get(color_mode, COLOR_GATES['grayscale'])
        for i in range(3):
            out[:, :, i] = brightness * gate[i]

    out[:, :, 3] = OPAQUE
    return out.reshape(-1)

from pathlib import Path
from typing import Union
import numpy as np
import numpy.typing as npt

from ..constants import CHANNELS, LUMA_WEIGHTS, OPAQUE
from ..errors import BufferSizeError

def get_output_filename(input_path: Union[str, Path]) -> Path:
    """
    Generate output filename with -dither suffix, avoiding overwrites.

    Args:
        input_path: Path to input image

    Returns:
        Path object for output file
    """
    path = Path(input_path)
    stem = path.stem
    suffix = path.suffix
    directory = path.parent

    # Start with base name
    output_path = directory / f"{stem}-dither{suffix}"

    # If file exists, append number
    counter = 1
    while output_path.exists():
        output_path = directory / f"{stem}-dither-{counter}{suffix}"
        counter += 1

    return output_path


def as_rgba(buffer: npt.ArrayLike, width: int, height: int) -> npt.NDArray[np.uint8]:
    """
    View a flat RGBA pixel buffer as a (height, width, 4) uint8 array.

    Accepts bytes, bytearray, memoryview or any array-like of 0-255 values.
    The input is never modified; callers get a read view or a fresh array.

    Raises:
        BufferSizeError: if dimensions are not positive or the length
            does not equal width * height * 4.
    """
    if width <= 0 or height <= 0:
        raise BufferSizeError(f"Image dimensions must be positive, got {width}x{height}")

    if isinstance(buffer, (bytes, bytearray, memoryview)):
        data = np.frombuffer(buffer, dtype=np.uint8)
    else:
        data = np.asarray(buffer).astype(np.uint8, copy=False).reshape(-1)

    expected = width * height * CHANNELS
    if data.size != expected:
        raise BufferSizeError(
            f"Buffer has {data.size} bytes, expected {expected} for {width}x{height} RGBA"
        )

    return data.reshape(height, width, CHANNELS)


def luminance(rgba: npt.NDArray[np.uint8]) -> npt.NDArray[np.float64]:
    """Per-pixel 0.299*R + 0.587*G + 0.114*B as float64, shape (height, width)."""
    r = rgba[:, :, 0].astype(float)
    g = rgba[:, :, 1].astype(float)
    b = rgba[:, :, 2].astype(float)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def round_half_up(values: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    # np.round rounds halves to even; pixel averages round .5 upwards
    return np.floor(values + 0.5)


def gray_to_rgba(gray: npt.NDArray[np.integer]) -> npt.NDArray[np.uint8]:
    """Flat RGBA buffer with the gray value in R, G and B and opaque alpha."""
    height, width = gray.shape
    out = np.empty((height, width, CHANNELS), dtype=np.uint8)
    out[:, :, 0] = gray
    out[:, :, 1] = gray
    out[:, :, 2] = gray
    out[:, :, 3] = OPAQUE
    return out.reshape(-1)

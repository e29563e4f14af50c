import logging
import numpy as np
import numpy.typing as npt
from numba import jit

from ..core.utils import as_rgba, gray_to_rgba, luminance

logger = logging.getLogger(__name__)

@jit(nopython=True)
def _pixelate_jit(
    gray: npt.NDArray[np.float64],
    out: npt.NDArray[np.int64],
    pixel_size: int
) -> None:
    """Core block-averaging loop optimized with Numba."""
    height, width = gray.shape

    for by in range(0, height, pixel_size):
        y_end = min(by + pixel_size, height)
        for bx in range(0, width, pixel_size):
            x_end = min(bx + pixel_size, width)

            # Blocks at the right/bottom edges are truncated, so count
            # only the pixels actually present
            total = 0.0
            count = 0
            for y in range(by, y_end):
                for x in range(bx, x_end):
                    total += gray[y, x]
                    count += 1

            avg = int(np.floor(total / count + 0.5))

            for y in range(by, y_end):
                for x in range(bx, x_end):
                    out[y, x] = avg


def pixelate(
    buffer: npt.ArrayLike,
    width: int,
    height: int,
    pixel_size: int
) -> npt.NDArray[np.uint8]:
    """
    Replace each pixel_size x pixel_size block with its average luminance.

    Blocks are anchored at the top-left corner; blocks on the right and
    bottom edges are truncated to the image. The averaged value is written
    to R, G and B of every pixel in the block, so color is discarded.

    Args:
        buffer: Flat RGBA buffer (width * height * 4 bytes).
        width: Image width in pixels.
        height: Image height in pixels.
        pixel_size: Block edge length. Values <= 1 leave the image unchanged.

    Returns:
        New flat RGBA uint8 buffer with opaque alpha.
    """
    rgba = as_rgba(buffer, width, height)
    if pixel_size <= 1:
        return rgba.reshape(-1).copy()

    gray = luminance(rgba)
    out = np.empty((height, width), dtype=np.int64)
    _pixelate_jit(gray, out, int(pixel_size))

    logger.debug("Pixelated %dx%d image with block size %d", width, height, pixel_size)
    return gray_to_rgba(out)

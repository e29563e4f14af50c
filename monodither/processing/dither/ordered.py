import numpy as np
import numpy.typing as npt

from ...constants import BAYER_NORMALIZED, BAYER_SPREAD
from ...core.utils import as_rgba, gray_to_rgba, luminance

def ordered_thresholds(
    width: int,
    height: int,
    threshold: float,
    matrix: npt.NDArray[np.float64] = BAYER_NORMALIZED
) -> npt.NDArray[np.float64]:
    """
    Effective per-pixel cutoffs for ordered dithering.

    The normalized matrix (values in (0, 1)) is tiled over the image and
    mapped to threshold + (value - 0.5) * 100, a +/-50 spread around the
    user threshold.
    """
    mh, mw = matrix.shape

    # Tile the matrix to cover the image
    tiled_matrix = np.tile(matrix, (height // mh + 1, width // mw + 1))
    tiled_matrix = tiled_matrix[:height, :width]

    return threshold + (tiled_matrix - 0.5) * BAYER_SPREAD


def dither_bayer(
    buffer: npt.ArrayLike,
    width: int,
    height: int,
    threshold: float
) -> npt.NDArray[np.uint8]:
    """
    Apply 4x4 ordered (Bayer) dithering.

    A pixel becomes white (255) when its luminance is strictly greater than
    the adjusted threshold at its position, black (0) otherwise. The
    threshold is not clamped; values far outside 0-255 give a solid image.

    Returns:
        New flat RGBA uint8 buffer where R == G == B in {0, 255}.
    """
    rgba = as_rgba(buffer, width, height)
    gray = luminance(rgba)
    effective_thresholds = ordered_thresholds(width, height, float(threshold))

    result = np.where(gray > effective_thresholds, 255, 0).astype(np.uint8)
    return gray_to_rgba(result)

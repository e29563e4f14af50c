import logging
import numpy as np
import numpy.typing as npt
from ...constants import ProcessingMode
from ...core.utils import as_rgba

from .ordered import dither_bayer

logger = logging.getLogger(__name__)

def apply_dithering_algorithm(
    mode: ProcessingMode,
    buffer: npt.ArrayLike,
    width: int,
    height: int,
    threshold: float
) -> npt.NDArray[np.uint8]:
    """
    Dispatch to appropriate dithering function.

    'dither-floyd' and 'halftone' are accepted modes without an
    implementation; the image passes through unchanged.
    """
    match mode:
        case 'dither-bayer':
            return dither_bayer(buffer, width, height, threshold)
        case 'dither-floyd' | 'halftone':
            logger.warning("Processing mode %r is not implemented, image passes through undithered", mode)
            return as_rgba(buffer, width, height).reshape(-1).copy()
        case _:
            raise ValueError(f"Unknown processing mode: {mode}")

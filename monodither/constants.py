from typing import Literal, Tuple
import numpy as np

# Processing modes accepted in a request. Only 'dither-bayer' has an implementation.
ProcessingMode = Literal['dither-bayer', 'dither-floyd', 'halftone']
PROCESSING_MODES: Tuple[str, ...] = ('dither-bayer', 'dither-floyd', 'halftone')

# Color modes
ColorMode = Literal['grayscale', 'blue', 'red', 'green', 'yellow', 'magenta', 'cyan', 'custom']
BaseColorMode = Literal['grayscale', 'blue', 'red', 'green', 'yellow', 'magenta', 'cyan']

# Channel gates for the fixed hues: output = brightness * gate
COLOR_GATES = {
    'grayscale': (1, 1, 1),
    'red': (1, 0, 0),
    'green': (0, 1, 0),
    'blue': (0, 0, 1),
    'yellow': (1, 1, 0),
    'magenta': (1, 0, 1),
    'cyan': (0, 1, 1),
}
COLOR_MODES: Tuple[str, ...] = tuple(COLOR_GATES) + ('custom',)

# Perceptual luminance weights (R, G, B)
LUMA_WEIGHTS: Tuple[float, float, float] = (0.299, 0.587, 0.114)

# RGBA, 4 interleaved bytes per pixel
CHANNELS: int = 4
OPAQUE: int = 255

# Matrices
# Bayer 4x4 matrix
BAYER_4x4 = np.array([
    [ 0,  8,  2, 10],
    [12,  4, 14,  6],
    [ 3, 11,  1,  9],
    [15,  7, 13,  5]
], dtype=float)
BAYER_SIZE: int = 4

# Thresholds in (0, 1): (value + 0.5) / 16
BAYER_NORMALIZED = (BAYER_4x4 + 0.5) / (BAYER_SIZE * BAYER_SIZE)
BAYER_NORMALIZED.setflags(write=False)

# Spread of the ordered-dither offset around the user threshold (+/- 50)
BAYER_SPREAD: float = 100.0

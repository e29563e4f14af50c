import numpy as np


def make_rgba(rgb: np.ndarray, alpha: int = 255) -> np.ndarray:
    """Build a flat RGBA buffer from an (h, w, 3) array."""
    height, width, _ = rgb.shape
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[:, :, :3] = rgb
    rgba[:, :, 3] = alpha
    return rgba.reshape(-1)


def make_gray(values: np.ndarray, alpha: int = 255) -> np.ndarray:
    """Build a flat RGBA buffer with R == G == B from an (h, w) array."""
    values = np.asarray(values, dtype=np.uint8)
    return make_rgba(np.dstack([values, values, values]), alpha=alpha)

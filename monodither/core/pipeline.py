import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from PIL import Image
import numpy as np
import numpy.typing as npt

from ..processing.color import CustomColors, apply_color_mode, parse_hex_color
from ..processing.dither import apply_dithering_algorithm
from ..processing.pixelate import pixelate
from .params import ProcessingParams
from .utils import as_rgba, get_output_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageData:
    """Processed pixels plus their dimensions."""

    width: int
    height: int
    data: npt.NDArray[np.uint8]


def resolve_custom_colors(params: ProcessingParams) -> Optional[CustomColors]:
    """
    Parse the custom colors when the custom mapping applies.

    Returns None unless color_mode is 'custom' and all three colors are set,
    in which case the color mapper falls back to grayscale.

    Raises:
        InvalidColorSpec: if any of the three colors is malformed.
    """
    if params.color_mode != 'custom':
        return None
    if not (params.custom_white and params.custom_grey and params.custom_black):
        logger.debug("Custom color mode without all three colors, using grayscale")
        return None
    return CustomColors(
        white=parse_hex_color(params.custom_white),
        grey=parse_hex_color(params.custom_grey),
        black=parse_hex_color(params.custom_black),
    )


def process(
    buffer: npt.ArrayLike,
    width: int,
    height: int,
    params: ProcessingParams
) -> ImageData:
    """
    Run pixelation, dithering and color mapping on a flat RGBA buffer.

    Steps:
        1. Pixelate when params.pixel_size > 1.
        2. Dither according to params.mode. Modes without an
           implementation pass the image through unchanged.
        3. Always apply the color mapping, even when nothing was dithered;
           the red channel is read as brightness.

    The input buffer is never modified.

    Raises:
        BufferSizeError: if the buffer does not hold width * height RGBA pixels.
        InvalidColorSpec: if a custom color is malformed.
    """
    data = as_rgba(buffer, width, height).reshape(-1)
    custom_colors = resolve_custom_colors(params)

    if params.pixel_size > 1:
        data = pixelate(data, width, height, params.pixel_size)

    data = apply_dithering_algorithm(params.mode, data, width, height, params.threshold)
    data = apply_color_mode(data, width, height, params.color_mode, custom_colors)

    logger.debug(
        "Processed %dx%d image (mode=%s, pixel_size=%d, color_mode=%s)",
        width, height, params.mode, params.pixel_size, params.color_mode
    )
    return ImageData(width=width, height=height, data=data)


def process_image(img: Image.Image, params: ProcessingParams) -> Image.Image:
    """
    Apply the pipeline to a PIL Image.

    Returns:
        New RGBA image of the same size.
    """
    # Convert to RGBA if needed
    if img.mode != 'RGBA':
        img = img.convert('RGBA')

    width, height = img.size
    result = process(np.asarray(img, dtype=np.uint8), width, height, params)
    return Image.fromarray(result.data.reshape(height, width, 4), 'RGBA')


def dither_image(
    input_path: Union[str, Path],
    params: ProcessingParams,
    output_path: Optional[Union[str, Path]] = None
) -> Path:
    """
    Load an image, process it and save the result.

    Args:
        input_path: Path to input image file
        params: Processing parameters
        output_path: Optional path for output file. If None, generated from input filename.

    Returns:
        Path to output file
    """
    # Load image
    try:
        img = Image.open(input_path)
    except Exception as e:
        raise ValueError(f"Failed to open image: {e}")

    result = process_image(img, params)

    # Determine final output path
    final_output_path: Path
    if output_path is None:
        final_output_path = get_output_filename(input_path)
    else:
        final_output_path = Path(output_path)

    # Save with appropriate format
    if final_output_path.suffix.lower() in ['.jpg', '.jpeg']:
        result.convert('RGB').save(final_output_path, 'JPEG', quality=95)
    elif final_output_path.suffix.lower() == '.png':
        result.save(final_output_path, 'PNG')
    else:
        result.save(final_output_path)

    logger.info("Saved %s", final_output_path)
    return final_output_path

import sys
import click
from typing import Optional
from .config import SETTINGS, configure_logging
from .constants import COLOR_MODES, PROCESSING_MODES
from .core.params import ProcessingParams
from .core.pipeline import dither_image

@click.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--mode',
    type=click.Choice(list(PROCESSING_MODES), case_sensitive=False),
    default=SETTINGS.mode,
    show_default=True,
    help='Processing mode. Only dither-bayer is implemented; the others pass the image through.'
)
@click.option(
    '--threshold',
    type=float,
    default=SETTINGS.threshold,
    show_default=True,
    help='Dithering midpoint (roughly 0-255, not clamped)'
)
@click.option(
    '--pixel-size',
    type=int,
    default=SETTINGS.pixel_size,
    show_default=True,
    help='Block size for pixelation. 1 disables pixelation.'
)
@click.option(
    '--color-mode',
    type=click.Choice(list(COLOR_MODES), case_sensitive=False),
    default=SETTINGS.color_mode,
    show_default=True,
    help='Color mapping for the dithered image.'
)
@click.option(
    '--custom-white',
    default=None,
    help='Hex color for white pixels in custom mode (e.g. "#F5F0E1").'
)
@click.option(
    '--custom-grey',
    default=None,
    help='Hex color scaled by brightness for in-between pixels in custom mode.'
)
@click.option(
    '--custom-black',
    default=None,
    help='Hex color for black pixels in custom mode.'
)
@click.option(
    '--output', '-o',
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help='Output file path. Defaults to automatic naming.'
)
def main(
    image: str,
    mode: str,
    threshold: float,
    pixel_size: int,
    color_mode: str,
    custom_white: Optional[str],
    custom_grey: Optional[str],
    custom_black: Optional[str],
    output: Optional[str]
) -> None:
    """Dither, pixelate and recolor an image.

    IMAGE is the path to the input image file (PNG or JPG).

    The image is optionally pixelated (--pixel-size), converted to black and
    white with a 4x4 Bayer matrix (--mode, --threshold) and then mapped to
    colors (--color-mode).

    Custom mode needs all three of --custom-white, --custom-grey and
    --custom-black; without them the output stays grayscale.
    """
    configure_logging()
    try:
        params = ProcessingParams(
            mode=mode.lower(),  # type: ignore[arg-type]
            threshold=threshold,
            pixel_size=pixel_size,
            color_mode=color_mode.lower(),  # type: ignore[arg-type]
            custom_white=custom_white,
            custom_grey=custom_grey,
            custom_black=custom_black,
        )
        output_path = dither_image(image, params, output_path=output)
        click.secho(f"✓ Processed image saved to: {output_path}", fg='green')
    except Exception as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        sys.exit(1)

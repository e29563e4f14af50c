import numpy as np
from click.testing import CliRunner
from PIL import Image

from monodither.cli import main


def test_cli_writes_processed_image(tmp_path):
    src = tmp_path / 'input.png'
    out = tmp_path / 'output.png'
    Image.new('RGB', (8, 8), color=(128, 128, 128)).save(src)

    runner = CliRunner()
    result = runner.invoke(main, [
        str(src), '--pixel-size', '2', '--threshold', '128', '--color-mode', 'blue', '-o', str(out)
    ])

    assert result.exit_code == 0, result.output
    assert str(out) in result.output
    with Image.open(out) as saved:
        pixels = np.array(saved)
    assert pixels.shape == (8, 8, 4)
    assert set(np.unique(pixels[:, :, 2])) == {0, 255}
    assert np.all(pixels[:, :, 0] == 0)


def test_cli_default_output_name(tmp_path):
    src = tmp_path / 'cat.png'
    Image.new('RGB', (4, 4), color=(255, 255, 255)).save(src)

    result = CliRunner().invoke(main, [str(src), '--mode', 'halftone'])

    assert result.exit_code == 0, result.output
    assert (tmp_path / 'cat-dither.png').exists()


def test_cli_custom_colors(tmp_path):
    src = tmp_path / 'white.png'
    out = tmp_path / 'custom.png'
    Image.new('RGB', (4, 4), color=(255, 255, 255)).save(src)

    result = CliRunner().invoke(main, [
        str(src), '--color-mode', 'custom',
        '--custom-white', '#AABBCC', '--custom-grey', '#808080', '--custom-black', '#000000',
        '-o', str(out),
    ])

    assert result.exit_code == 0, result.output
    with Image.open(out) as saved:
        assert saved.getpixel((0, 0)) == (170, 187, 204, 255)


def test_cli_reports_invalid_color(tmp_path):
    src = tmp_path / 'in.png'
    Image.new('RGB', (4, 4)).save(src)

    result = CliRunner().invoke(main, [
        str(src), '--color-mode', 'custom',
        '--custom-white', 'nothex', '--custom-grey', '#808080', '--custom-black', '#000000',
    ])

    assert result.exit_code == 1
    assert 'Error:' in result.output

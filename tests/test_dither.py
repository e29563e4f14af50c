import numpy as np
import pytest

from monodither.constants import BAYER_4x4, BAYER_NORMALIZED
from monodither.processing.dither import apply_dithering_algorithm
from monodither.processing.dither.ordered import dither_bayer, ordered_thresholds
from helpers import make_gray


def test_bayer_normalization():
    """Normalized thresholds are (value + 0.5) / 16 and lie in (0, 1)."""
    assert BAYER_NORMALIZED.shape == (4, 4)
    assert BAYER_NORMALIZED[0, 0] == pytest.approx(0.5 / 16)
    assert BAYER_NORMALIZED[3, 0] == pytest.approx(15.5 / 16)
    assert np.all((BAYER_NORMALIZED > 0) & (BAYER_NORMALIZED < 1))
    assert sorted(BAYER_4x4.ravel().astype(int)) == list(range(16))


def test_dither_output_is_binary(random_rgba):
    out = dither_bayer(random_rgba, 17, 13, 128).reshape(13, 17, 4)

    assert set(np.unique(out[:, :, :3])) <= {0, 255}
    assert np.array_equal(out[:, :, 0], out[:, :, 1])
    assert np.array_equal(out[:, :, 0], out[:, :, 2])
    assert np.all(out[:, :, 3] == 255)


def test_dither_mid_gray_gives_checkerboard():
    """At threshold 128 ranks 0-7 push the cutoff below 128, ranks 8-15 above."""
    out = dither_bayer(make_gray(np.full((4, 4), 128)), 4, 4, 128).reshape(4, 4, 4)

    expected = np.array([
        [255, 0, 255, 0],
        [0, 255, 0, 255],
        [255, 0, 255, 0],
        [0, 255, 0, 255],
    ])
    assert np.array_equal(out[:, :, 0], expected)


def test_bayer_thresholds_tile_with_period_four():
    thresholds = ordered_thresholds(11, 9, 100.0)

    assert np.array_equal(thresholds[:, :-4], thresholds[:, 4:])
    assert np.array_equal(thresholds[:-4, :], thresholds[4:, :])
    # Spread of +/-50 around the base threshold
    assert thresholds.min() == pytest.approx(100.0 + (0.5 / 16 - 0.5) * 100)
    assert thresholds.max() == pytest.approx(100.0 + (15.5 / 16 - 0.5) * 100)


def test_dither_pattern_repeats_horizontally():
    """Columns repeating with period 4 give output repeating with period 4."""
    rng = np.random.default_rng(7)
    tile = rng.integers(0, 256, size=(6, 4))
    values = np.tile(tile, (1, 3))
    out = dither_bayer(make_gray(values), 12, 6, 128).reshape(6, 12, 4)

    assert np.array_equal(out[:, :4, 0], out[:, 4:8, 0])
    assert np.array_equal(out[:, 4:8, 0], out[:, 8:, 0])


@pytest.mark.parametrize("threshold, expected", [(-1000, 255), (1000, 0)])
def test_dither_threshold_is_not_clamped(random_rgba, threshold, expected):
    out = dither_bayer(random_rgba, 17, 13, threshold).reshape(13, 17, 4)

    assert np.all(out[:, :, :3] == expected)


def test_dither_does_not_modify_input(random_rgba):
    original = random_rgba.copy()
    dither_bayer(random_rgba, 17, 13, 128)

    assert np.array_equal(random_rgba, original)


@pytest.mark.parametrize("mode", ["dither-floyd", "halftone"])
def test_unimplemented_modes_pass_through(random_rgba, mode):
    out = apply_dithering_algorithm(mode, random_rgba, 17, 13, 128)

    assert np.array_equal(out, random_rgba)
    assert out is not random_rgba


def test_unknown_mode_raises(random_rgba):
    with pytest.raises(ValueError):
        apply_dithering_algorithm("atkinson", random_rgba, 17, 13, 128)  # type: ignore[arg-type]

from pixelhue.conversions import (
    complements,
    fold_hue,
    unit_rgb_to_hue,
    unit_rgb_to_saturation,
    unit_rgb_to_lightness,
    unit_rgb_to_hsl,
    rgb_to_packed_hsl,
)
from pixelhue.samples import samples_rgb_packed_hsl
import itertools
import numpy as np

tolerance = 1e-9

def test_rgb_to_packed_hsl():
    for (r, g, b), (h_exp, l_exp, s_exp) in samples_rgb_packed_hsl.items():
        h, l, s = rgb_to_packed_hsl(r, g, b)

        assert abs(h - h_exp) < tolerance
        assert abs(l - l_exp) < tolerance
        assert abs(s - s_exp) < tolerance

def test_unit_rgb_to_hsl_order():
    for (r, g, b), (h_exp, l_exp, s_exp) in samples_rgb_packed_hsl.items():
        h, s, l = unit_rgb_to_hsl(r, g, b)

        assert abs(h - h_exp) < tolerance
        assert abs(s - s_exp) < tolerance
        assert abs(l - l_exp) < tolerance

def test_derivation_matches_forward_conversion():
    for r, g, b in samples_rgb_packed_hsl:
        h, l, s = rgb_to_packed_hsl(r, g, b)
        assert unit_rgb_to_hue(r, g, b) == h
        assert unit_rgb_to_lightness(r, g, b) == l
        assert unit_rgb_to_saturation(r, g, b) == s

def test_saturation_is_spread_not_textbook():
    # Textbook HSL would give 1.0 here (delta / (1 - |2L - 1|)).
    assert abs(unit_rgb_to_saturation(0.5, 0.25, 0.25) - 0.25) < tolerance
    assert abs(unit_rgb_to_saturation(0.1, 0.0, 0.0) - 0.1) < tolerance

def test_gray_complements_are_zero():
    assert complements(0.3, 0.3, 0.3, 0.3, 0.0) == (0.0, 0.0, 0.0)
    assert unit_rgb_to_hue(0.3, 0.3, 0.3) == 0.0

def test_complements():
    rc, gc, bc = complements(1.0, 0.5, 0.0, 1.0, 1.0)
    assert (rc, gc, bc) == (0.0, 0.5, 1.0)

def test_hue_range():
    grid = np.linspace(0.0, 1.0, 11)
    for r, g, b in itertools.product(grid, repeat=3):
        if r == g == b:
            continue
        h = unit_rgb_to_hue(r, g, b)
        assert 0.0 <= h < 1.0

def test_magenta_side_wraps_positive():
    h = unit_rgb_to_hue(1.0, 0.0, 0.5)
    assert abs(h - 330 / 360) < tolerance

def test_fold_hue():
    assert fold_hue(1.0) == 0.0
    assert fold_hue(np.float32(1.0)) == 0.0
    assert fold_hue(0.999) == 0.999
    assert fold_hue(0.0) == 0.0

def test_hue_range_float32_near_full_turn():
    # Blue a hair above green on a red color sits just short of 360°.
    for b in (1e-6, 1e-7, 5e-8, 1e-8):
        r, g, b = np.float32(1.0), np.float32(0.0), np.float32(b)
        h = unit_rgb_to_hue(r, g, b)
        assert 0.0 <= h < 1.0
        h_packed, _, _ = rgb_to_packed_hsl(r, g, b)
        assert 0.0 <= h_packed < 1.0

def test_hue_range_float32_grid():
    grid = np.linspace(0.0, 1.0, 11, dtype=np.float32)
    offsets = np.array([0.0, 1e-7, -1e-7], dtype=np.float32)
    for r, g, b, db in itertools.product(grid, grid, grid, offsets):
        h = unit_rgb_to_hue(r, g, np.float32(b + db))
        assert 0.0 <= h < 1.0

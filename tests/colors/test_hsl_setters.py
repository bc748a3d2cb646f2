from pixelhue import Color
import numpy as np
import pytest

tolerance = 1e-5

def test_set_hue_rotates():
    color = Color(1.0, 0.0, 0.0, 0.4)
    color.set_hue(0.5)
    assert np.allclose(color.channels[:3], (0.0, 1.0, 1.0), atol=tolerance)
    assert color.alpha == pytest.approx(0.4)
    assert color.space == "rgb"

def test_set_hue_keeps_lightness_and_saturation():
    color = Color(0.6, 0.2, 0.4)
    lightness, saturation = color.value(), color.saturation()
    color.set_hue(0.25)
    assert color.hue() == pytest.approx(0.25, abs=tolerance)
    assert color.value() == pytest.approx(lightness, abs=tolerance)
    assert color.saturation() == pytest.approx(saturation, abs=tolerance)

def test_set_hue_wraps():
    a = Color(1.0, 0.0, 0.0)
    b = Color(1.0, 0.0, 0.0)
    a.set_hue(1 / 3)
    b.set_hue(1 + 1 / 3)
    assert np.allclose(a.channels, b.channels, atol=tolerance)

    c = Color(1.0, 0.0, 0.0)
    c.set_hue(-1 / 3)
    assert c.hue() == pytest.approx(2 / 3, abs=tolerance)

def test_set_saturation():
    color = Color(1.0, 0.0, 0.0)
    color.set_saturation(0.5)
    assert np.allclose(color.channels[:3], (0.75, 0.25, 0.25), atol=tolerance)
    assert color.saturation() == pytest.approx(0.5, abs=tolerance)

def test_set_saturation_to_zero_gives_gray():
    color = Color(0.2, 0.4, 0.6)
    color.set_saturation(0.0)
    assert np.allclose(color.channels[:3], (0.4, 0.4, 0.4), atol=tolerance)

def test_set_value():
    color = Color(0.5, 0.0, 0.0)
    color.set_value(0.75)
    assert np.allclose(color.channels[:3], (1.0, 0.5, 0.5), atol=tolerance)
    assert color.value() == pytest.approx(0.75, abs=tolerance)

def test_set_lightness_alias():
    color = Color(0.5, 0.5, 0.5)
    color.set_lightness(0.25)
    assert color.channels[:3] == (0.25, 0.25, 0.25)

from PIL import Image
from pixelhue import Color, pixel_from_image, put_pixel
import numpy as np
import pytest

def test_read_rgb_pixel():
    image = Image.new("RGB", (2, 2), (255, 128, 0))
    color = pixel_from_image(image, (1, 1))
    assert color.to_pixel().tolist() == [255, 128, 0]
    assert color.alpha == 1.0

def test_read_rgba_pixel():
    image = Image.new("RGBA", (1, 1), (0, 0, 255, 51))
    color = pixel_from_image(image, (0, 0))
    assert color.to_pixel().tolist() == [0, 0, 255]
    assert color.alpha == pytest.approx(0.2)

def test_read_grayscale_pixel():
    image = Image.new("L", (1, 1), 128)
    color = pixel_from_image(image, (0, 0))
    assert color.saturation() == 0.0
    assert color.red_byte == 128

def test_read_palette_pixel_through_rgb():
    image = Image.new("RGB", (1, 1), (10, 20, 30)).convert("P", palette=Image.Palette.ADAPTIVE)
    color = pixel_from_image(image, (0, 0))
    assert color.to_pixel().tolist() == [10, 20, 30]

def test_write_rgb_pixel():
    image = Image.new("RGB", (2, 1))
    put_pixel(image, (1, 0), Color(0.0, 1.0, 0.5))
    assert image.getpixel((1, 0)) == (0, 255, 128)
    assert image.getpixel((0, 0)) == (0, 0, 0)

def test_write_rgba_pixel():
    image = Image.new("RGBA", (1, 1))
    put_pixel(image, (0, 0), Color(1.0, 0.0, 0.0, 0.5))
    assert image.getpixel((0, 0)) == (255, 0, 0, 128)

def test_write_grayscale_pixel_uses_lightness():
    image = Image.new("L", (1, 1))
    put_pixel(image, (0, 0), Color(1.0, 0.0, 0.0))
    assert image.getpixel((0, 0)) == 128

def test_write_rejects_other_modes():
    image = Image.new("CMYK", (1, 1))
    with pytest.raises(ValueError):
        put_pixel(image, (0, 0), Color())

def test_hue_rotation_through_image():
    image = Image.new("RGB", (1, 1), (255, 0, 0))
    color = pixel_from_image(image, (0, 0))
    color.rgb_to_hsl()
    color.red = (color.red + 1 / 3) % 1.0
    color.hsl_to_rgb()
    put_pixel(image, (0, 0), color)
    assert np.array_equal(np.asarray(image)[0, 0], [0, 255, 0])

def test_read_gray_alpha_pixel_keeps_alpha():
    image = Image.new("LA", (1, 1), (128, 64))
    color = pixel_from_image(image, (0, 0))
    assert color.to_pixel().tolist() == [128, 128, 128]
    assert color.alpha_byte == 64

def test_read_palette_with_transparency_keeps_alpha():
    image = Image.new("P", (1, 1), 0)
    image.putpalette([10, 20, 30] * 256)
    image.info["transparency"] = 0
    color = pixel_from_image(image, (0, 0))
    assert color.to_pixel().tolist() == [10, 20, 30]
    assert color.alpha == 0.0

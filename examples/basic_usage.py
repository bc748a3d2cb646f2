"""Basic pixelhue usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from PIL import Image

from pixelhue import Color, pixel_from_image, put_pixel


def demonstrate_color() -> None:
    # Read-only HSL projection of an RGB color.
    accent = Color.from_bytes(255, 128, 64)
    print(accent)
    print("Pixel:", accent.to_pixel())


def demonstrate_in_place_conversion() -> None:
    # Flip the same slots to HSL, shift the hue a third of a turn, flip back.
    color = Color(0.9, 0.3, 0.1)
    color.rgb_to_hsl()
    print("Packed HSL:", color.packed_hsl)
    color.red = (color.red + 1 / 3) % 1.0
    color.hsl_to_rgb()
    print("Rotated:", color)


def demonstrate_image_pixels() -> None:
    # Desaturate every pixel of a tiny image, one color at a time.
    image = Image.new("RGB", (4, 1))
    for x, rgb in enumerate([(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)]):
        image.putpixel((x, 0), rgb)

    for x in range(image.width):
        color = pixel_from_image(image, (x, 0))
        color.set_saturation(color.saturation() / 2)
        put_pixel(image, (x, 0), color)

    print("Desaturated:", list(image.getdata()))


if __name__ == "__main__":
    demonstrate_color()
    demonstrate_in_place_conversion()
    demonstrate_image_pixels()

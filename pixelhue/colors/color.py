from __future__ import annotations
from typing import Any, Tuple
import warnings
import numpy as np
from numpy import ndarray
from boundednumbers.functions import cyclic_wrap_float
from ..conversions import (
    max_channel,
    min_channel,
    fold_hue,
    unit_rgb_to_hue,
    unit_rgb_to_saturation,
    unit_rgb_to_lightness,
    rgb_to_packed_hsl,
    packed_hsl_to_rgb,
    byte_to_float,
    float_to_byte,
)
from ..types.format_type import FormatType, default_format_dtypes, format_valid_dtypes
from ..types.color_types import (
    Channel,
    ColorSpace,
    FloatTriple,
    PixelLike,
    Scalar,
    SLOT_NAMES,
    to_float32,
    validate_channel,
    validate_space,
)

_SLOTS = {"red": "_r", "green": "_g", "blue": "_b", "alpha": "_a"}


class ColorSpaceError(ValueError):
    """Raised when an operation needs the color in the other space."""


def _float_channel(slot: str, doc: str) -> property:
    def fget(self: Color) -> float:
        return float(getattr(self, slot))

    def fset(self: Color, value: Scalar) -> None:
        setattr(self, slot, to_float32(value))

    return property(fget, fset, doc=doc)


def _byte_channel(slot: str, doc: str) -> property:
    def fget(self: Color) -> int:
        return float_to_byte(getattr(self, slot))

    def fset(self: Color, value: int) -> None:
        setattr(self, slot, byte_to_float(value))

    return property(fget, fset, doc=doc)


class Color:
    """
    A floating-point RGBA color that can flip its own channels to HSL.

    The four channels are stored as 32-bit floats, nominally in [0, 1].
    ``rgb_to_hsl`` overwrites the red, green and blue slots with hue,
    lightness and saturation (in that order) and ``hsl_to_rgb`` reverses it,
    so a pipeline can switch spaces without allocating a second color.
    The ``space`` tag records which interpretation the slots currently hold.
    Alpha is never touched by space conversion.

    Equality compares the three primary slots only; alpha and the space tag
    are ignored.
    """
    __slots__ = ('_r', '_g', '_b', '_a', '_space')

    def __init__(
        self,
        red: Scalar = 0.0,
        green: Scalar = 0.0,
        blue: Scalar = 0.0,
        alpha: Scalar = 1.0,
        *,
        space: ColorSpace = "rgb",
    ) -> None:
        valid_types = format_valid_dtypes[FormatType.FLOAT]
        for name, v in zip(_SLOTS, (red, green, blue, alpha)):
            if isinstance(v, bool) or not isinstance(v, valid_types):
                raise TypeError(f"Color expects float channels, got {type(v).__name__} for {name}")

        self._r = to_float32(red)
        self._g = to_float32(green)
        self._b = to_float32(blue)
        self._a = to_float32(alpha)
        self._space: ColorSpace = validate_space(space)

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int, alpha: int = 255) -> Color:
        """Build a color from single-byte channels in [0, 255]."""
        color = cls()
        color._r = byte_to_float(red)
        color._g = byte_to_float(green)
        color._b = byte_to_float(blue)
        color._a = byte_to_float(alpha)
        return color

    @classmethod
    def from_pixel(cls, pixel: PixelLike) -> Color:
        """
        Build an opaque color from a packed 3-byte pixel.

        Args:
            pixel: Any length-3 sequence of bytes, typically one ``uint8``
                row of an image array

        Returns:
            Color with alpha 1.0
        """
        values = np.asarray(pixel)
        if values.shape != (3,):
            raise ValueError(f"Pixel must hold exactly 3 channels, got shape {values.shape}")
        if not np.issubdtype(values.dtype, np.integer):
            raise TypeError(f"Pixel channels must be integers, got dtype {values.dtype}")
        return cls.from_bytes(*(int(v) for v in values))

    @classmethod
    def from_hsl(cls, hue: Scalar, lightness: Scalar, saturation: Scalar, alpha: Scalar = 1.0) -> Color:
        """Build a color already holding packed HSL."""
        return cls(hue, lightness, saturation, alpha, space="hsl")

    # ------------------ CHANNEL ACCESS ------------------
    red = _float_channel('_r', "Red slot (hue after rgb_to_hsl).")
    green = _float_channel('_g', "Green slot (lightness after rgb_to_hsl).")
    blue = _float_channel('_b', "Blue slot (saturation after rgb_to_hsl).")
    alpha = _float_channel('_a', "Opacity.")

    red_byte = _byte_channel('_r', "Red slot as a byte.")
    green_byte = _byte_channel('_g', "Green slot as a byte.")
    blue_byte = _byte_channel('_b', "Blue slot as a byte.")
    alpha_byte = _byte_channel('_a', "Opacity as a byte.")

    @property
    def space(self) -> ColorSpace:
        """Interpretation of the three primary slots, "rgb" or "hsl"."""
        return self._space

    @property
    def channels(self) -> Tuple[float, float, float, float]:
        """All four slots as plain floats."""
        return float(self._r), float(self._g), float(self._b), float(self._a)

    @property
    def packed_hsl(self) -> FloatTriple:
        """(hue, lightness, saturation) as stored in the primary slots."""
        self._require("hsl", "packed_hsl")
        return float(self._r), float(self._g), float(self._b)

    def channel(self, name: Channel, format_type: FormatType = FormatType.FLOAT) -> Scalar:
        """
        Read one channel by name.

        Args:
            name: "red", "green", "blue" or "alpha"
            format_type: FormatType.FLOAT for [0, 1], FormatType.INT for [0, 255]
        """
        raw = getattr(self, _SLOTS[validate_channel(name)])
        if FormatType(format_type) == FormatType.INT:
            return float_to_byte(raw)
        return float(raw)

    def set_channel(self, name: Channel, value: Scalar, format_type: FormatType = FormatType.FLOAT) -> None:
        slot = _SLOTS[validate_channel(name)]
        if FormatType(format_type) == FormatType.INT:
            setattr(self, slot, byte_to_float(value))
        else:
            setattr(self, slot, to_float32(value))

    # ------------------ EXTREMA ------------------
    def max_channel(self) -> float:
        return float(max_channel(self._r, self._g, self._b))

    def min_channel(self) -> float:
        return float(min_channel(self._r, self._g, self._b))

    # ------------------ HSL DERIVATION (read-only) ------------------
    def hue(self) -> float:
        """Position on the hue wheel in [0, 1); 0 for grays."""
        self._require("rgb", "hue")
        return float(fold_hue(to_float32(unit_rgb_to_hue(self._r, self._g, self._b))))

    def saturation(self) -> float:
        """Channel spread, max - min."""
        self._require("rgb", "saturation")
        return float(to_float32(unit_rgb_to_saturation(self._r, self._g, self._b)))

    def value(self) -> float:
        """Lightness, (max + min) / 2."""
        self._require("rgb", "value")
        return float(to_float32(unit_rgb_to_lightness(self._r, self._g, self._b)))

    lightness = value

    # ------------------ HSL ASSIGNMENT ------------------
    def set_hue(self, hue: Scalar) -> None:
        """Replace the hue, keeping lightness and saturation. Wraps into [0, 1)."""
        self._edit_hsl(0, cyclic_wrap_float(float(hue), 0.0, 1.0), "set_hue")

    def set_saturation(self, saturation: Scalar) -> None:
        """Replace the channel spread, keeping hue and lightness. Not clamped."""
        self._edit_hsl(2, saturation, "set_saturation")

    def set_value(self, value: Scalar) -> None:
        """Replace the lightness, keeping hue and saturation. Not clamped."""
        self._edit_hsl(1, value, "set_value")

    set_lightness = set_value

    def _edit_hsl(self, index: int, component: Scalar, operation: str) -> None:
        self._require("rgb", operation)
        packed = list(rgb_to_packed_hsl(self._r, self._g, self._b))
        packed[index] = to_float32(component)
        self._store(*packed_hsl_to_rgb(*packed))

    # ------------------ SPACE CONVERSION (in place) ------------------
    def rgb_to_hsl(self) -> Color:
        """
        Overwrite the RGB slots with packed HSL.

        red := hue, green := lightness, blue := saturation. Alpha is left
        alone.

        Returns:
            self, for chaining
        """
        self._require("rgb", "rgb_to_hsl")
        self._store(*rgb_to_packed_hsl(self._r, self._g, self._b))
        self._r = fold_hue(self._r)
        self._space = "hsl"
        return self

    def hsl_to_rgb(self) -> Color:
        """
        Overwrite packed HSL slots with RGB. Inverse of ``rgb_to_hsl``.

        Returns:
            self, for chaining
        """
        self._require("hsl", "hsl_to_rgb")
        self._store(*packed_hsl_to_rgb(self._r, self._g, self._b))
        self._space = "rgb"
        return self

    # ------------------ MISC ------------------
    def normalize_rgb(self) -> Color:
        """
        Scale the RGB channels so the brightest becomes 1.0.

        Black has no brightest channel to scale by; it is left unchanged and a
        RuntimeWarning is issued.
        """
        self._require("rgb", "normalize_rgb")
        max_c = max_channel(self._r, self._g, self._b)
        if max_c == 0:
            warnings.warn("normalize_rgb() on black: no channel to scale by, color left unchanged", RuntimeWarning, stacklevel=2)
            return self
        scale = np.float32(1.0) / max_c
        self._store(self._r * scale, self._g * scale, self._b * scale)
        return self

    def copy_alpha_to_rgb(self) -> Color:
        """Turn the color into the gray whose intensity is the alpha value."""
        self._store(self._a, self._a, self._a)
        self._space = "rgb"
        return self

    def assign_rgb(self, other: Color) -> Color:
        """Copy the primary slots and space tag of ``other``; alpha is kept."""
        self._r, self._g, self._b = other._r, other._g, other._b
        self._space = other._space
        return self

    def copy(self) -> Color:
        new = type(self).__new__(type(self))
        new._r, new._g, new._b, new._a = self._r, self._g, self._b, self._a
        new._space = self._space
        return new

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Color:
        return self.copy()

    # ------------------ INTEROP ------------------
    def to_pixel(self) -> ndarray:
        """
        Export the RGB channels as a packed 3-byte pixel.

        Each channel is rounded to the nearest byte and clamped to [0, 255].
        """
        self._require("rgb", "to_pixel")
        return np.array(
            [float_to_byte(self._r), float_to_byte(self._g), float_to_byte(self._b)],
            dtype=default_format_dtypes[FormatType.INT],
        )

    # ------------------ COMPARISON & PRINTING ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(self._r == other._r and self._g == other._g and self._b == other._b)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(self._r != other._r or self._g != other._g or self._b != other._b)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(red={float(self._r)!r}, green={float(self._g)!r}, "
            f"blue={float(self._b)!r}, alpha={float(self._a)!r}, space={self._space!r})"
        )

    def __str__(self) -> str:
        first, second, third = SLOT_NAMES[self._space]
        line = f"{first}: {float(self._r):g}  {second}: {float(self._g):g}  {third}: {float(self._b):g}"
        if self._space == "rgb":
            line += f" | Hue: {self.hue():g}  Saturation: {self.saturation():g}  Value: {self.value():g}"
        return line

    # ------------------ INTERNALS ------------------
    def _store(self, r: Scalar, g: Scalar, b: Scalar) -> None:
        self._r = to_float32(r)
        self._g = to_float32(g)
        self._b = to_float32(b)

    def _require(self, space: ColorSpace, operation: str) -> None:
        if self._space != space:
            raise ColorSpaceError(
                f"{operation}() needs a color in {space!r} space, but this color holds {self._space!r}"
            )

import numpy as np
# RED
RED_FLOAT_RGB = np.array([1.0, 0.0, 0.0], dtype=np.float32)
RED_INT_RGB = np.array([255, 0, 0], dtype=np.uint8)
RED_PACKED_HSL = np.array([0.0, 0.5, 1.0], dtype=np.float32)

# GREEN
GREEN_FLOAT_RGB = np.array([0.0, 1.0, 0.0], dtype=np.float32)
GREEN_INT_RGB = np.array([0, 255, 0], dtype=np.uint8)
GREEN_PACKED_HSL = np.array([1 / 3, 0.5, 1.0], dtype=np.float32)

# BLUE
BLUE_FLOAT_RGB = np.array([0.0, 0.0, 1.0], dtype=np.float32)
BLUE_INT_RGB = np.array([0, 0, 255], dtype=np.uint8)
BLUE_PACKED_HSL = np.array([2 / 3, 0.5, 1.0], dtype=np.float32)

# YELLOW
YELLOW_FLOAT_RGB = np.array([1.0, 1.0, 0.0], dtype=np.float32)
YELLOW_INT_RGB = np.array([255, 255, 0], dtype=np.uint8)
YELLOW_PACKED_HSL = np.array([1 / 6, 0.5, 1.0], dtype=np.float32)

# MAGENTA
MAGENTA_FLOAT_RGB = np.array([1.0, 0.0, 1.0], dtype=np.float32)
MAGENTA_INT_RGB = np.array([255, 0, 255], dtype=np.uint8)
MAGENTA_PACKED_HSL = np.array([5 / 6, 0.5, 1.0], dtype=np.float32)

# CYAN
CYAN_FLOAT_RGB = np.array([0.0, 1.0, 1.0], dtype=np.float32)
CYAN_INT_RGB = np.array([0, 255, 255], dtype=np.uint8)
CYAN_PACKED_HSL = np.array([0.5, 0.5, 1.0], dtype=np.float32)

# WHITE
WHITE_FLOAT_RGB = np.array([1.0, 1.0, 1.0], dtype=np.float32)
WHITE_INT_RGB = np.array([255, 255, 255], dtype=np.uint8)
WHITE_PACKED_HSL = np.array([0.0, 1.0, 0.0], dtype=np.float32)

# BLACK
BLACK_FLOAT_RGB = np.array([0.0, 0.0, 0.0], dtype=np.float32)
BLACK_INT_RGB = np.array([0, 0, 0], dtype=np.uint8)
BLACK_PACKED_HSL = np.array([0.0, 0.0, 0.0], dtype=np.float32)

# name -> (float rgb, byte rgb, packed hsl)
samples_named_colors: dict[str, tuple[np.ndarray, np.ndarray, np.ndarray]] = {
    "red": (RED_FLOAT_RGB, RED_INT_RGB, RED_PACKED_HSL),
    "green": (GREEN_FLOAT_RGB, GREEN_INT_RGB, GREEN_PACKED_HSL),
    "blue": (BLUE_FLOAT_RGB, BLUE_INT_RGB, BLUE_PACKED_HSL),
    "yellow": (YELLOW_FLOAT_RGB, YELLOW_INT_RGB, YELLOW_PACKED_HSL),
    "magenta": (MAGENTA_FLOAT_RGB, MAGENTA_INT_RGB, MAGENTA_PACKED_HSL),
    "cyan": (CYAN_FLOAT_RGB, CYAN_INT_RGB, CYAN_PACKED_HSL),
    "white": (WHITE_FLOAT_RGB, WHITE_INT_RGB, WHITE_PACKED_HSL),
    "black": (BLACK_FLOAT_RGB, BLACK_INT_RGB, BLACK_PACKED_HSL),
}

# (r, g, b) -> (hue, lightness, saturation), saturation being max - min
samples_rgb_packed_hsl: dict[tuple[float, float, float], tuple[float, float, float]] = {
    (1.0, 0.0, 0.0): (0.0, 0.5, 1.0),
    (0.0, 1.0, 0.0): (1 / 3, 0.5, 1.0),
    (0.0, 0.0, 1.0): (2 / 3, 0.5, 1.0),
    (1.0, 1.0, 0.0): (1 / 6, 0.5, 1.0),
    (0.0, 1.0, 1.0): (0.5, 0.5, 1.0),
    (1.0, 0.0, 1.0): (5 / 6, 0.5, 1.0),
    (1.0, 0.5, 0.0): (1 / 12, 0.5, 1.0),
    (0.5, 0.25, 0.25): (0.0, 0.375, 0.25),
    (0.2, 0.4, 0.6): (7 / 12, 0.4, 0.4),
    (0.25, 0.75, 0.5): (5 / 12, 0.5, 0.5),
    (0.6, 0.2, 0.4): (11 / 12, 0.4, 0.4),
    (1.0, 1.0, 1.0): (0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# Byte triples -> (hue, saturation, value) as read off the color
samples_bytes_hsv: dict[tuple[int, int, int], tuple[float, float, float]] = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (1 / 3, 1.0, 0.5),
    (0, 0, 255): (2 / 3, 1.0, 0.5),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
}

from .colors import samples_rgb_packed_hsl, samples_bytes_hsv, samples_named_colors

__all__ = ['samples_rgb_packed_hsl', 'samples_bytes_hsv', 'samples_named_colors']

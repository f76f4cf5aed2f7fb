"""Building blocks for audio fingerprinting: base64 encoding, simhash, bit packing,
gradient and box/Gaussian filters, rolling integral images, an image builder and
a leading-silence remover."""

__version__ = "1.5.1"

__all__ = [
    "base64",
    "gaussian_filter",
    "gradient",
    "image_builder",
    "packing",
    "rolling_integral_image",
    "silence_remover",
    "simhash",
]
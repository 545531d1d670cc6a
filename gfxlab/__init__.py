"""Building blocks for small 3D scenes: BMP images, shadows, geometry, camera and water."""

__version__ = "0.1.0"

__all__ = [
    "bmp",
    "camera",
    "geometry",
    "shadows",
    "surfaces",
    "water",
]
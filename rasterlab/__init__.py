"""Small computer-graphics building blocks: Netpbm images, rasterization, geometry, scenes and vertex data."""

__version__ = "0.1.0"

__all__ = [
    "background",
    "geometry",
    "imaging",
    "locators",
    "motion",
    "netpbm",
    "palette",
    "pointer",
    "raster",
    "shapes",
    "soup",
    "vertex",
]
from typing import Set

from .raster import ImageRaster, load_image, load_raster, normalize_image

IMAGE_EXTENSIONS: Set[str] = {".png", ".bmp", ".gif", ".jpg", ".jpeg"}

__all__ = ["IMAGE_EXTENSIONS", "ImageRaster", "load_image", "load_raster", "normalize_image"]

from __future__ import annotations

from PIL import Image, ImageOps

from ..encoding.types import Color, Raster


class ImageRaster(Raster):
    """Raster view over a Pillow image in RGB or RGBA mode."""

    def __init__(self, image: Image.Image) -> None:
        self.image = normalize_image(image)
        self._access = self.image.load()

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def pixel(self, x: int, y: int) -> Color:
        return self._access[x, y]


def load_image(path: str) -> Image.Image:
    with Image.open(path) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()


def normalize_image(img: Image.Image) -> Image.Image:
    if img.mode in ("RGB", "RGBA"):
        return img
    if "A" in img.getbands() or "transparency" in img.info:
        return img.convert("RGBA")
    return img.convert("RGB")


def load_raster(path: str) -> ImageRaster:
    return ImageRaster(load_image(path))

from __future__ import annotations

from typing import List, Tuple

import pytest

from glyphpack.encoding import PixelRaster

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class CountingRaster(PixelRaster):
    """PixelRaster that records every pixel read."""

    def __init__(self, pixels, width) -> None:
        super().__init__(pixels, width)
        object.__setattr__(self, "reads", [])

    def pixel(self, x: int, y: int):
        self.reads.append((x, y))
        return super().pixel(x, y)


def solid(width: int, height: int, color: Tuple[int, ...]) -> List[Tuple[int, ...]]:
    return [color] * (width * height)


@pytest.fixture
def counting_raster():
    def make(pixels, width):
        return CountingRaster(pixels, width)

    return make

"""画像・リサイズ要求・解決済みサイズのデータモデル。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from PIL import Image

from clip_resizer.errors import InvalidDimension

CHANNELS = 4
PIXEL_MODE = "RGBA"


class SizeUnit(Enum):
    PIXEL = "pixel"
    PERCENT = "percent"

    @property
    def suffix(self) -> str:
        return "px" if self is SizeUnit.PIXEL else "%"


class UnitChoice(Enum):
    """対話モードで選ぶ単位"""

    PIXEL = "Pixel"
    PERCENT = "Percentage"
    RATIO = "Ratio"


class Dimension(Enum):
    HEIGHT = "Height"
    WIDTH = "Width"


class DimensionChoice(Enum):
    """対話モードでどの辺を指定するか"""

    HEIGHT = "Height"
    WIDTH = "Width"
    BOTH = "Both"


@dataclass(frozen=True)
class ImageSample:
    """RGBA 行優先のピクセル列を持つ画像。"""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"画像サイズが不正です: {self.width}x{self.height}")
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise ValueError(
                f"ピクセル長が一致しません: {len(self.pixels)} (期待値 {expected})"
            )

    @classmethod
    def from_image(cls, image: Image.Image) -> "ImageSample":
        """Pillow 画像を RGBA に正規化して取り込む。"""
        if image.mode != PIXEL_MODE:
            image = image.convert(PIXEL_MODE)
        width, height = image.size
        return cls(width=width, height=height, pixels=image.tobytes())

    def to_image(self) -> Image.Image:
        return Image.frombytes(PIXEL_MODE, (self.width, self.height), self.pixels)

    @property
    def byte_size(self) -> int:
        return len(self.pixels)


@dataclass(frozen=True)
class ResolvedSize:
    height: int
    width: int

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0:
            raise InvalidDimension(
                f"リサイズ後のサイズが0px以下になります: 高さ {self.height}px / 幅 {self.width}px"
            )


@dataclass(frozen=True)
class DimensionsRequest:
    """高さ・幅（片方のみも可）をピクセルまたはパーセントで指定する要求。"""

    height: Optional[int] = None
    width: Optional[int] = None
    unit: SizeUnit = SizeUnit.PIXEL
    preserve_aspect: bool = True


@dataclass(frozen=True)
class RatioRequest:
    ratio: float


@dataclass(frozen=True)
class UnspecifiedRequest:
    """設定なし。すべて対話で決める。"""


ResizeRequest = Union[DimensionsRequest, RatioRequest, UnspecifiedRequest]

"""リサイズ寸法の計算ヘルパー。"""

from __future__ import annotations

import math

from clip_resizer.models import ResolvedSize, SizeUnit


def apply_ratio(source_height: int, source_width: int, ratio: float) -> ResolvedSize:
    """両辺に倍率を掛けて切り捨てる。"""
    return ResolvedSize(
        height=math.floor(source_height * ratio),
        width=math.floor(source_width * ratio),
    )


def apply_unit(source_dim: int, value: int, unit: SizeUnit) -> int:
    """ピクセルならそのまま、パーセントなら元の辺に対する割合を返す。"""
    if unit is SizeUnit.PIXEL:
        return value
    return (source_dim * value) // 100


def derive_keeping_aspect(
    source_given: int,
    given_value: int,
    source_other: int,
    unit: SizeUnit,
) -> int:
    """指定された辺から、縦横比を保つもう一方の辺を求める。

    パーセント指定は元画像に対する比率そのものなので、同じ割合を他方の辺に適用する。
    ピクセル指定は浮動小数点で計算し、最後に一度だけ切り捨てる。
    """
    if unit is SizeUnit.PERCENT:
        return apply_unit(source_other, given_value, unit)
    return int(source_other * given_value / source_given)

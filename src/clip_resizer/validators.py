"""
入力値検証のためのユーティリティモジュール
"""
from __future__ import annotations

import math
from typing import Union

from clip_resizer.models import SizeUnit


class ValueValidator:
    """数値検証クラス"""

    # パーセントは 0（画像なし）と 100（変更なし）を除外
    PERCENT_RANGE = (1, 99)

    @classmethod
    def _to_int(cls, value: Union[int, str], name: str) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name}は整数を入力してください")
        if isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("値が入力されていません")
            try:
                return int(text)
            except ValueError:
                raise ValueError(f"`{text}` は{name}として解釈できません")
        if not isinstance(value, int):
            raise ValueError(f"{name}は整数を入力してください")
        return value

    @classmethod
    def validate_pixels(cls, value: Union[int, str]) -> int:
        """ピクセル値を検証（1以上の整数）"""
        pixels = cls._to_int(value, "ピクセル")
        if pixels <= 0:
            raise ValueError("ピクセルは0より大きい整数で指定してください")
        return pixels

    @classmethod
    def validate_percent(cls, value: Union[int, str]) -> int:
        """パーセント値を検証（1〜99の整数）"""
        percent = cls._to_int(value, "パーセント")
        min_val, max_val = cls.PERCENT_RANGE
        if not min_val <= percent <= max_val:
            raise ValueError("パーセントは0と100を除く1〜99の整数で指定してください")
        return percent

    @classmethod
    def validate_ratio(cls, value: Union[float, int, str]) -> float:
        """倍率を検証（0より大きく1以下）"""
        if isinstance(value, bool):
            raise ValueError("倍率は数値を入力してください")
        if isinstance(value, str):
            text = value.strip()
            if not text:
                raise ValueError("値が入力されていません")
            try:
                value = float(text)
            except ValueError:
                raise ValueError(f"`{text}` は倍率として解釈できません")
        if not isinstance(value, (int, float)):
            raise ValueError("倍率は数値を入力してください")

        ratio = float(value)
        if math.isnan(ratio) or not 0.0 < ratio <= 1.0:
            raise ValueError("倍率は0より大きく1以下の数値で指定してください")
        return ratio

    @classmethod
    def validate_dimension(cls, value: Union[int, str], unit: SizeUnit) -> int:
        """単位に応じて寸法値を検証"""
        if unit is SizeUnit.PERCENT:
            return cls.validate_percent(value)
        return cls.validate_pixels(value)

"""コマンドライン引数からリサイズ要求を組み立てる。"""

from __future__ import annotations

from typing import Optional

from clip_resizer.errors import ConfigError
from clip_resizer.models import (
    DimensionsRequest,
    RatioRequest,
    ResizeRequest,
    SizeUnit,
    UnspecifiedRequest,
)
from clip_resizer.validators import ValueValidator


def build_resize_request(
    *,
    height: Optional[int] = None,
    width: Optional[int] = None,
    percent: bool = False,
    ratio: Optional[float] = None,
    ignore_aspect_ratio: bool = False,
) -> ResizeRequest:
    """
    引数の組み合わせと値の範囲を検証してリサイズ要求を返します

    Raises:
        ConfigError: 排他的なオプションの併用、または範囲外の値
    """
    has_dimension = height is not None or width is not None

    if ratio is not None:
        conflicts = []
        if height is not None:
            conflicts.append("--height")
        if width is not None:
            conflicts.append("--width")
        if percent:
            conflicts.append("--percent")
        if ignore_aspect_ratio:
            conflicts.append("--ignore-aspect-ratio")
        if conflicts:
            raise ConfigError(f"--ratio は {', '.join(conflicts)} と同時に指定できません")
        try:
            return RatioRequest(ratio=ValueValidator.validate_ratio(ratio))
        except ValueError as e:
            raise ConfigError(f"--ratio: {e}") from e

    if percent and not has_dimension:
        raise ConfigError("--percent には --height または --width が必要です")
    if ignore_aspect_ratio and not has_dimension:
        raise ConfigError("--ignore-aspect-ratio には --height または --width が必要です")
    if ignore_aspect_ratio and height is not None and width is not None:
        raise ConfigError("--height と --width を両方指定した場合、--ignore-aspect-ratio は指定できません")

    if not has_dimension:
        return UnspecifiedRequest()

    unit = SizeUnit.PERCENT if percent else SizeUnit.PIXEL
    if height is not None:
        height = _validate_flag("--height", height, unit)
    if width is not None:
        width = _validate_flag("--width", width, unit)

    return DimensionsRequest(
        height=height,
        width=width,
        unit=unit,
        preserve_aspect=not ignore_aspect_ratio,
    )


def _validate_flag(flag: str, value: int, unit: SizeUnit) -> int:
    try:
        return ValueValidator.validate_dimension(value, unit)
    except ValueError as e:
        raise ConfigError(f"{flag}: {e}") from e

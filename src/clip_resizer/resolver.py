"""
リサイズ要求から最終的な (高さ, 幅) を決定するモジュール

要求に足りない情報があるときだけ InteractionPort を通してユーザーに問い合わせます。
要求の組み合わせの妥当性は設定読み込み時に検証済みである前提ですが、
問い合わせで得た値や倍率はここでも再検証します。
"""

from __future__ import annotations

from loguru import logger

from clip_resizer.errors import InvalidDimension, InvalidRatio
from clip_resizer.interaction import InteractionPort
from clip_resizer.models import (
    Dimension,
    DimensionChoice,
    DimensionsRequest,
    ImageSample,
    RatioRequest,
    ResizeRequest,
    ResolvedSize,
    SizeUnit,
    UnitChoice,
    UnspecifiedRequest,
)
from clip_resizer.resize_math import apply_ratio, apply_unit, derive_keeping_aspect
from clip_resizer.validators import ValueValidator

UNIT_OPTIONS = [
    (UnitChoice.PIXEL.value, UnitChoice.PIXEL),
    (UnitChoice.PERCENT.value, UnitChoice.PERCENT),
    (UnitChoice.RATIO.value, UnitChoice.RATIO),
]

DIMENSION_OPTIONS = [
    (DimensionChoice.HEIGHT.value, DimensionChoice.HEIGHT),
    (DimensionChoice.WIDTH.value, DimensionChoice.WIDTH),
    (DimensionChoice.BOTH.value, DimensionChoice.BOTH),
]


def resolve(request: ResizeRequest, source: ImageSample, ask: InteractionPort) -> ResolvedSize:
    """
    リサイズ後のサイズを決定します

    Args:
        request: 設定から作られたリサイズ要求
        source: 元画像
        ask: 不足情報を問い合わせる窓口

    Returns:
        ResolvedSize: 高さ・幅ともに1px以上のサイズ

    Raises:
        InvalidRatio: 倍率が (0, 1] の範囲外
        InvalidDimension: 寸法が不正、または計算結果が0pxになる
        InteractionAborted: ユーザーが入力を中断した
    """
    if isinstance(request, RatioRequest):
        return _resolve_ratio(request.ratio, source)

    if isinstance(request, DimensionsRequest):
        if request.height is None and request.width is None:
            logger.debug("高さ・幅のどちらも指定がないため対話モードで決定します")
            return _resolve_interactively(source, ask)
        return _resolve_dimensions(request, source, ask)

    if isinstance(request, UnspecifiedRequest):
        return _resolve_interactively(source, ask)

    raise TypeError(f"未対応のリサイズ要求です: {request!r}")


def ask_unit_choice(ask: InteractionPort) -> UnitChoice:
    return ask.ask_choice("単位を選択してください", UNIT_OPTIONS)


def ask_dimension_choice(ask: InteractionPort) -> DimensionChoice:
    return ask.ask_choice("指定する辺を選択してください", DIMENSION_OPTIONS)


def ask_dimension(ask: InteractionPort, dimension: Dimension, unit: SizeUnit) -> int:
    """単位に合わせて検証した寸法値を問い合わせる。"""
    value = ask.ask_value(
        f"{dimension.value} ({unit.suffix})",
        lambda raw: ValueValidator.validate_dimension(raw, unit),
    )
    return _checked_dimension(value, unit, dimension)


def ask_ratio(ask: InteractionPort) -> float:
    value = ask.ask_value("Ratio", ValueValidator.validate_ratio)
    return _checked_ratio(value)


def _checked_dimension(value: int, unit: SizeUnit, dimension: Dimension) -> int:
    try:
        return ValueValidator.validate_dimension(value, unit)
    except ValueError as e:
        raise InvalidDimension(f"{dimension.value}: {e}") from e


def _checked_ratio(ratio: float) -> float:
    try:
        return ValueValidator.validate_ratio(ratio)
    except ValueError as e:
        raise InvalidRatio(ratio) from e


def _resolve_ratio(ratio: float, source: ImageSample) -> ResolvedSize:
    ratio = _checked_ratio(ratio)
    return apply_ratio(source.height, source.width, ratio)


def _resolve_literal(source: ImageSample, height: int, width: int, unit: SizeUnit) -> ResolvedSize:
    return ResolvedSize(
        height=apply_unit(source.height, height, unit),
        width=apply_unit(source.width, width, unit),
    )


def _resolve_keeping_aspect(
    source: ImageSample,
    given: Dimension,
    value: int,
    unit: SizeUnit,
) -> ResolvedSize:
    if given is Dimension.HEIGHT:
        return ResolvedSize(
            height=apply_unit(source.height, value, unit),
            width=derive_keeping_aspect(source.height, value, source.width, unit),
        )
    return ResolvedSize(
        height=derive_keeping_aspect(source.width, value, source.height, unit),
        width=apply_unit(source.width, value, unit),
    )


def _resolve_dimensions(
    request: DimensionsRequest,
    source: ImageSample,
    ask: InteractionPort,
) -> ResolvedSize:
    unit = request.unit
    height = request.height
    width = request.width
    if height is not None:
        height = _checked_dimension(height, unit, Dimension.HEIGHT)
    if width is not None:
        width = _checked_dimension(width, unit, Dimension.WIDTH)

    # 両辺指定済みなら縦横比の維持は考慮しない
    if height is not None and width is not None:
        return _resolve_literal(source, height, width, unit)

    if request.preserve_aspect:
        if height is not None:
            return _resolve_keeping_aspect(source, Dimension.HEIGHT, height, unit)
        return _resolve_keeping_aspect(source, Dimension.WIDTH, width, unit)

    if height is None:
        height = ask_dimension(ask, Dimension.HEIGHT, unit)
    else:
        width = ask_dimension(ask, Dimension.WIDTH, unit)
    return _resolve_literal(source, height, width, unit)


def _resolve_interactively(source: ImageSample, ask: InteractionPort) -> ResolvedSize:
    unit_choice = ask_unit_choice(ask)
    if unit_choice is UnitChoice.RATIO:
        return _resolve_ratio(ask_ratio(ask), source)

    unit = SizeUnit.PIXEL if unit_choice is UnitChoice.PIXEL else SizeUnit.PERCENT
    choice = ask_dimension_choice(ask)

    if choice is DimensionChoice.HEIGHT:
        height = ask_dimension(ask, Dimension.HEIGHT, unit)
        return _resolve_keeping_aspect(source, Dimension.HEIGHT, height, unit)

    if choice is DimensionChoice.WIDTH:
        width = ask_dimension(ask, Dimension.WIDTH, unit)
        return _resolve_keeping_aspect(source, Dimension.WIDTH, width, unit)

    height = ask_dimension(ask, Dimension.HEIGHT, unit)
    width = ask_dimension(ask, Dimension.WIDTH, unit)
    return _resolve_literal(source, height, width, unit)

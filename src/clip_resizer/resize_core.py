#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
クリップボード画像リサイズのコア機能モジュール

ロギング設定、Lanczos フィルタによるリサンプリング、
例外から日本語メッセージへの変換を提供します。
"""

import sys
from pathlib import Path
from typing import Optional, Union

from PIL import Image, UnidentifiedImageError
from loguru import logger

from clip_resizer.errors import ClipboardError, ClipResizerError
from clip_resizer.models import ImageSample, ResolvedSize


# ログ設定
def setup_logging(
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_file: Optional[Union[str, Path]] = None,
    retention: Optional[str] = None,
) -> None:
    """
    ロギングの設定を行います

    Args:
        console_level: 標準エラー出力のログレベル
        file_level: ファイル出力のログレベル
        log_file: ログファイルのパス（loguru の {time} 書式を含められる）
        retention: 古いログファイルを削除する期間（例: "30 days"）
    """
    logger.remove()  # デフォルト設定を削除
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{function}</cyan>: <white>{message}</white>",
        colorize=True,
        level=console_level,
    )
    if log_file is None:
        return
    logger.add(
        log_file,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{function}:{line} - {message}",
        rotation="1 day",
        retention=retention,
        level=file_level,
        encoding="utf-8",
    )


def resample_image(source: ImageSample, size: ResolvedSize) -> ImageSample:
    """
    画像を指定サイズにリサンプリングします

    Args:
        source: 元画像
        size: リサイズ後のサイズ

    Returns:
        ImageSample: Lanczos フィルタでリサイズした新しい画像
    """
    img = source.to_image()
    resized = img.resize((size.width, size.height), Image.LANCZOS)
    logger.debug(
        f"リサンプリング: {source.width}x{source.height} → {size.width}x{size.height}"
    )
    return ImageSample.from_image(resized)


def get_japanese_error_message(error: BaseException) -> str:
    """
    例外から日本語のエラーメッセージを生成します

    Args:
        error: 例外オブジェクト

    Returns:
        str: 日本語エラーメッセージ
    """
    error_type = type(error).__name__
    error_msg = str(error)

    # ツール固有のエラーはメッセージをそのまま使う
    if isinstance(error, ClipboardError):
        return f"クリップボードエラー: {error_msg}"
    elif isinstance(error, ClipResizerError):
        return error_msg

    # 画像関連エラー
    elif isinstance(error, UnidentifiedImageError):
        return f"画像として認識できません: {error_msg}"
    elif error_type == "DecompressionBombError":
        return f"画像が大きすぎます（圧縮爆弾の可能性）: {error_msg}"

    elif isinstance(error, MemoryError):
        return "メモリ不足エラー: 画像が大きすぎるか、使用可能なメモリが不足しています"
    elif isinstance(error, OSError):
        return f"システムエラー: {error_msg}"
    elif isinstance(error, ValueError):
        return f"無効な値: {error_msg}"

    # その他
    else:
        return f"{error_type}: {error_msg}"

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
resize_core.py のユニットテスト
"""

from pathlib import Path

from conftest import make_sample
from PIL import UnidentifiedImageError
from loguru import logger

from clip_resizer.errors import ClipboardError, InvalidRatio
from clip_resizer.models import ResolvedSize
from clip_resizer.resize_core import get_japanese_error_message, resample_image, setup_logging


class TestResampleImage:
    """resample_image 関数のテスト"""

    def test_resizes_to_requested_size(self):
        output = resample_image(make_sample(800, 600), ResolvedSize(height=300, width=400))

        assert (output.width, output.height) == (400, 300)
        assert output.byte_size == 400 * 300 * 4

    def test_uniform_color_is_preserved(self):
        output = resample_image(make_sample(50, 50, color=(0, 128, 255, 255)), ResolvedSize(10, 20))

        assert output.pixels[:4] == bytes([0, 128, 255, 255])

    def test_source_is_not_modified(self):
        source = make_sample(30, 30)
        before = source.pixels

        resample_image(source, ResolvedSize(5, 5))

        assert source.pixels == before


class TestJapaneseErrorMessage:
    """get_japanese_error_message 関数のテスト"""

    def test_tool_errors(self):
        assert get_japanese_error_message(ClipboardError("x")) == "クリップボードエラー: x"
        assert "倍率" in get_japanese_error_message(InvalidRatio(2.0))

    def test_library_errors(self):
        assert get_japanese_error_message(UnidentifiedImageError("bad")).startswith("画像として認識できません")
        assert get_japanese_error_message(MemoryError()).startswith("メモリ不足エラー")
        assert get_japanese_error_message(OSError("disk")) == "システムエラー: disk"
        assert get_japanese_error_message(KeyError("k")) == "KeyError: 'k'"


def test_setup_logging_writes_file(tmp_path: Path):
    log_file = tmp_path / "run.log"
    setup_logging(console_level="ERROR", file_level="DEBUG", log_file=log_file)
    try:
        logger.debug("ファイルに出力されるメッセージ")
    finally:
        logger.remove()

    assert "ファイルに出力されるメッセージ" in log_file.read_text(encoding="utf-8")

#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
pytest設定ファイル
共通のフィクスチャやテスト用のクリップボード・対話入力を定義
"""

from typing import Callable, Optional

import pytest
from PIL import Image

from clip_resizer.errors import ClipboardError, InteractionAborted
from clip_resizer.models import ImageSample


def make_sample(width: int, height: int, color=(255, 0, 0, 255)) -> ImageSample:
    return ImageSample.from_image(Image.new("RGBA", (width, height), color=color))


class FakeClipboard:
    """メモリ上のクリップボード"""

    def __init__(self, current: Optional[ImageSample] = None, *, fail_writes: bool = False):
        self.current = current
        self.fail_writes = fail_writes
        self.reads = 0
        self.writes: list[ImageSample] = []

    def read_image(self) -> ImageSample:
        self.reads += 1
        if self.current is None:
            raise ClipboardError("クリップボードに画像がありません")
        return self.current

    def write_image(self, sample: ImageSample) -> None:
        self.writes.append(sample)
        if self.fail_writes:
            raise ClipboardError("書き込み失敗")
        self.current = sample


class ScriptedInteraction:
    """あらかじめ用意した回答を順に返す InteractionPort"""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.labels: list[str] = []

    def _next(self):
        if not self.answers:
            raise InteractionAborted("回答がありません")
        return self.answers.pop(0)

    def ask_choice(self, label, options):
        self.labels.append(label)
        answer = self._next()
        values = [value for _text, value in options]
        assert answer in values
        return answer

    def ask_value(self, label, parser):
        self.labels.append(label)
        while True:
            raw = self._next()
            try:
                return parser(str(raw))
            except ValueError:
                continue


@pytest.fixture
def sample_factory() -> Callable[..., ImageSample]:
    return make_sample


@pytest.fixture
def source_800x600() -> ImageSample:
    return make_sample(800, 600)


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()

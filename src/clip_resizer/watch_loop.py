"""
クリップボード監視ループ

一定間隔でクリップボードを読み、新しい画像であればサイズを決めてリサイズし、
結果をクリップボードへ書き戻します。1回の処理はすべて順番に実行され、
次の読み取りは必ず待機の後になります。
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from loguru import logger
from tqdm import tqdm

from clip_resizer.clipboard import ClipboardPort
from clip_resizer.errors import ClipboardError, ResolveError
from clip_resizer.fingerprint import Decision, Fingerprint, FingerprintTracker
from clip_resizer.interaction import InteractionPort
from clip_resizer.models import ImageSample, ResizeRequest, ResolvedSize
from clip_resizer.report import build_stats_lines, processing_status
from clip_resizer.resize_core import get_japanese_error_message, resample_image
from clip_resizer.resolver import resolve

POLL_INTERVAL_SECONDS = 0.25


class IterationOutcome(Enum):
    NO_IMAGE = "no_image"
    ECHO = "echo"
    REJECTED_AGAIN = "rejected_again"
    RESOLVE_FAILED = "resolve_failed"
    RESAMPLE_FAILED = "resample_failed"
    PUBLISH_FAILED = "publish_failed"
    PUBLISHED = "published"


@dataclass
class WatchSession:
    """プロセス内の処理件数"""

    published: int = 0
    failed: int = 0
    skipped_echo: int = 0


class WatchLoop:
    def __init__(
        self,
        *,
        clipboard: ClipboardPort,
        request: ResizeRequest,
        interaction: InteractionPort,
        tracker: Optional[FingerprintTracker] = None,
        resampler: Callable[[ImageSample, ResolvedSize], ImageSample] = resample_image,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.perf_counter,
        emit: Callable[[str], None] = tqdm.write,
    ) -> None:
        self._clipboard = clipboard
        self._request = request
        self._interaction = interaction
        self._tracker = tracker or FingerprintTracker()
        self._resampler = resampler
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._clock = clock
        self._emit = emit
        # 処理に失敗した入力。クリップボードが変わるまで再処理しない
        self._rejected: Optional[Fingerprint] = None
        self.session = WatchSession()

    @property
    def tracker(self) -> FingerprintTracker:
        return self._tracker

    def run(self) -> None:
        """プロセスが終了するまでクリップボードを監視し続ける。"""
        logger.info("クリップボードの監視を開始しました（Ctrl+C で終了）")
        while True:
            self.run_once()
            self._sleep(self._poll_interval)

    def run_once(self) -> IterationOutcome:
        """クリップボードを1回確認し、必要なら画像を処理する。"""
        try:
            source = self._clipboard.read_image()
        except ClipboardError as e:
            logger.debug(f"スキップ: {e}")
            return IterationOutcome.NO_IMAGE

        fingerprint = Fingerprint.of(source)
        if self._tracker.observe(fingerprint) is Decision.ECHO_OF_OWN_OUTPUT:
            self.session.skipped_echo += 1
            return IterationOutcome.ECHO
        if fingerprint == self._rejected:
            return IterationOutcome.REJECTED_AGAIN

        logger.info(f"新しい画像を検出しました: {source.width}x{source.height}")
        logger.debug(f"フィンガープリント: {fingerprint.short()}")

        try:
            size = resolve(self._request, source, self._interaction)
        except ResolveError as e:
            logger.warning(f"この画像の処理を中止しました: {get_japanese_error_message(e)}")
            return self._fail(fingerprint, IterationOutcome.RESOLVE_FAILED)

        start_time = self._clock()
        try:
            with processing_status():
                output = self._resampler(source, size)
        except Exception as e:
            logger.exception(f"リサイズに失敗しました: {get_japanese_error_message(e)}")
            return self._fail(fingerprint, IterationOutcome.RESAMPLE_FAILED)

        # 書き込みが途中で失敗してもクリップボードが変わっている可能性があるため、先に記録する
        self._tracker.record(Fingerprint.of(output))

        try:
            self._clipboard.write_image(output)
        except ClipboardError as e:
            logger.warning(f"💥 画像をクリップボードに移せませんでした: {get_japanese_error_message(e)}")
            return self._fail(fingerprint, IterationOutcome.PUBLISH_FAILED)
        except Exception as e:
            logger.exception(f"💥 画像をクリップボードに移せませんでした: {get_japanese_error_message(e)}")
            return self._fail(fingerprint, IterationOutcome.PUBLISH_FAILED)

        elapsed = self._clock() - start_time
        for line in build_stats_lines(source=source, output=output, elapsed_seconds=elapsed):
            self._emit(line)

        self._rejected = None
        self.session.published += 1
        return IterationOutcome.PUBLISHED

    def _fail(self, fingerprint: Fingerprint, outcome: IterationOutcome) -> IterationOutcome:
        self._rejected = fingerprint
        self.session.failed += 1
        return outcome

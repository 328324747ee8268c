"""コンソール出力用のテキスト生成と、処理中のステータス表示。"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from tqdm import tqdm

from clip_resizer.models import (
    DimensionsRequest,
    ImageSample,
    RatioRequest,
    ResizeRequest,
)

BANNER = r"""
  ____ _ _       ____           _
 / ___| (_)_ __ |  _ \ ___  ___(_)_______ _ __
| |   | | | '_ \| |_) / _ \/ __| |_  / _ \ '__|
| |___| | | |_) |  _ <  __/\__ \ |/ /  __/ |
 \____|_|_| .__/|_| \_\___||___/_/___\___|_|
          |_|
"""


def format_file_size(size_in_bytes: float) -> str:
    """バイト数を読みやすい形式に変換する（例: 1.2 MiB）。"""
    for unit in ["B", "KiB", "MiB", "GiB"]:
        if size_in_bytes < 1024.0 or unit == "GiB":
            break
        size_in_bytes /= 1024.0
    if unit == "B":
        return f"{int(size_in_bytes)} B"
    return f"{size_in_bytes:.1f} {unit}"


def format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{int(seconds * 1000)}ms"
    return f"{seconds:.2f}秒"


def describe_request(request: ResizeRequest) -> str:
    """起動時に表示するリサイズ設定の説明"""
    if isinstance(request, RatioRequest):
        return f"倍率 {request.ratio:g}"

    if isinstance(request, DimensionsRequest):
        suffix = request.unit.suffix
        parts = []
        if request.height is not None:
            parts.append(f"高さ {request.height}{suffix}")
        if request.width is not None:
            parts.append(f"幅 {request.width}{suffix}")
        if not parts:
            return "対話モード（画像ごとに入力）"
        if len(parts) == 1:
            parts.append("縦横比維持" if request.preserve_aspect else "もう一方は画像ごとに入力")
        return " / ".join(parts)

    return "対話モード（画像ごとに入力）"


def build_stats_lines(*, source: ImageSample, output: ImageSample, elapsed_seconds: float) -> list[str]:
    """リサイズ結果の統計行を作る。"""

    def px(value: int) -> str:
        return f"{value}px"

    return [
        f"⚡処理時間: {format_duration(elapsed_seconds)}",
        f"↕️ 高さ: {px(source.height)} → {px(output.height)}",
        f"↔️ 幅: {px(source.width)} → {px(output.width)}",
        f"📊 サイズ: {format_file_size(output.byte_size)}",
        "📋 リサイズした画像をクリップボードにコピーしました",
        "",
    ]


def build_session_summary_text(*, published: int, failed: int, skipped_echo: int) -> str:
    return f"セッション終了: 処理 {published} 件 / 失敗 {failed} 件 / 自分の出力をスキップ {skipped_echo} 回"


@contextmanager
def processing_status(message: str = "処理中...") -> Iterator[None]:
    """処理中であることを示すステータス行を出し、終わったら消す。"""
    status = tqdm(
        total=None,
        desc=message,
        bar_format="{desc} {elapsed}",
        leave=False,
    )
    try:
        yield
    finally:
        status.close()

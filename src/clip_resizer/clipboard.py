"""
クリップボードとの画像の受け渡し

読み取りは Pillow の ImageGrab に任せ、書き込みはプラットフォームごとの
手段（Windows: pywin32 / macOS: osascript / Linux: wl-copy か xclip）で PNG を渡します。
"""

from __future__ import annotations

import io
import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol

from PIL import Image, ImageGrab
from loguru import logger

from clip_resizer.errors import ClipboardError
from clip_resizer.models import ImageSample

WRITE_TIMEOUT_SECONDS = 10


class ClipboardPort(Protocol):
    def read_image(self) -> ImageSample: ...

    def write_image(self, sample: ImageSample) -> None: ...


def encode_png(sample: ImageSample) -> bytes:
    with io.BytesIO() as buffer:
        sample.to_image().save(buffer, format="PNG")
        return buffer.getvalue()


def encode_dib(sample: ImageSample) -> bytes:
    """Windows の CF_DIB 形式（BMP からファイルヘッダーを除いたもの）"""
    with io.BytesIO() as buffer:
        sample.to_image().convert("RGB").save(buffer, format="BMP")
        return buffer.getvalue()[14:]


def _encode(encoder: Callable[[ImageSample], bytes], sample: ImageSample) -> bytes:
    try:
        return encoder(sample)
    except (OSError, ValueError) as e:
        raise ClipboardError(f"画像をエンコードできません: {e}") from e


def _linux_write_command(
    env: Mapping[str, str],
    which: Callable[[str], Optional[str]],
) -> list[str]:
    if env.get("WAYLAND_DISPLAY") and which("wl-copy"):
        return ["wl-copy", "--type", "image/png"]
    if which("xclip"):
        return ["xclip", "-selection", "clipboard", "-t", "image/png", "-i"]
    raise ClipboardError(
        "クリップボードに書き込むツールが見つかりません。wl-clipboard または xclip をインストールしてください"
    )


class SystemClipboard:
    """OS のクリップボードを使う ClipboardPort の実装"""

    def __init__(
        self,
        *,
        grab: Callable[[], Any] = ImageGrab.grabclipboard,
        platform: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
        which: Callable[[str], Optional[str]] = shutil.which,
    ) -> None:
        self._grab = grab
        self._platform = platform or sys.platform
        self._env = env if env is not None else os.environ
        self._run = run
        self._which = which

    def read_image(self) -> ImageSample:
        try:
            data = self._grab()
        except Exception as e:
            raise ClipboardError(f"クリップボードを読み取れません: {e}") from e

        if data is None:
            raise ClipboardError("クリップボードに画像がありません")
        # ファイルのコピーはファイル名のリストとして返る
        if not isinstance(data, Image.Image):
            raise ClipboardError(f"画像以外のデータです: {type(data).__name__}")

        try:
            return ImageSample.from_image(data)
        except (OSError, ValueError) as e:
            raise ClipboardError(f"画像を読み込めません: {e}") from e

    def write_image(self, sample: ImageSample) -> None:
        if self._platform == "win32":
            self._write_windows(sample)
        elif self._platform == "darwin":
            self._write_macos(sample)
        else:
            command = _linux_write_command(self._env, self._which)
            self._write_command(command, _encode(encode_png, sample))

    def _write_windows(self, sample: ImageSample) -> None:
        try:
            import win32clipboard
            import win32con
        except ImportError as e:
            raise ClipboardError(f"pywin32 が見つかりません: {e}") from e

        png = _encode(encode_png, sample)
        dib = _encode(encode_dib, sample)
        try:
            win32clipboard.OpenClipboard()
        except Exception as e:
            raise ClipboardError(f"クリップボードを開けません: {e}") from e
        try:
            win32clipboard.EmptyClipboard()
            # PNG を優先して読むアプリ（と ImageGrab）は透過を保ったまま受け取れる
            png_format = win32clipboard.RegisterClipboardFormat("PNG")
            win32clipboard.SetClipboardData(png_format, png)
            win32clipboard.SetClipboardData(win32con.CF_DIB, dib)
        except Exception as e:
            raise ClipboardError(f"クリップボードへの書き込みに失敗しました: {e}") from e
        finally:
            win32clipboard.CloseClipboard()

    def _write_macos(self, sample: ImageSample) -> None:
        png = _encode(encode_png, sample)
        try:
            with tempfile.TemporaryDirectory(prefix="clip_resizer_") as tmp:
                png_path = Path(tmp) / "resized.png"
                png_path.write_bytes(png)
                quoted = png_path.as_posix().replace("\\", "\\\\").replace('"', '\\"')
                script = f'set the clipboard to (read (POSIX file "{quoted}") as «class PNGf»)'
                self._write_command(["osascript", "-e", script], None)
        except OSError as e:
            raise ClipboardError(f"一時ファイルを作成できません: {e}") from e

    def _write_command(self, command: list[str], data: Optional[bytes]) -> None:
        logger.trace(f"クリップボード書き込みコマンド: {command[0]}")
        try:
            # xclip はバックグラウンドに残るため出力をパイプで受けない
            proc = self._run(
                command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=WRITE_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ClipboardError(f"{command[0]} を実行できません: {e}") from e
        if proc.returncode != 0:
            raise ClipboardError(f"{command[0]} が終了コード {proc.returncode} で失敗しました")

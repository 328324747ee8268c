"""clip-resizer の例外定義。"""

from __future__ import annotations


class ClipResizerError(Exception):
    """このツールが送出する例外の基底クラス"""


class ClipboardError(ClipResizerError):
    """クリップボードの読み書きに失敗した"""


class ConfigError(ClipResizerError, ValueError):
    """起動時の設定（コマンドライン引数）が不正"""


class ResolveError(ClipResizerError):
    """リサイズ後のサイズを決定できなかった（現在の画像のみ中断）"""


class InvalidRatio(ResolveError, ValueError):
    """倍率が (0, 1] の範囲外"""

    def __init__(self, ratio: float) -> None:
        super().__init__(f"倍率は0より大きく1以下で指定してください: {ratio}")
        self.ratio = ratio


class InvalidDimension(ResolveError, ValueError):
    """寸法が不正"""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InteractionAborted(ResolveError):
    """ユーザーが入力を中断した"""

"""自分が書き込んだ画像を見分けるためのフィンガープリント管理。

このツールは読み取り元と同じクリップボードへ結果を書き戻すため、
直前の出力を覚えておかないと自分の出力を新しい画像として再処理し続けてしまう。
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from clip_resizer.models import ImageSample


@dataclass(frozen=True)
class Fingerprint:
    """画像サイズとピクセル内容の SHA-256。等価比較のみに使う。"""

    digest: str

    @classmethod
    def of(cls, sample: ImageSample) -> "Fingerprint":
        # 同じバイト列でも縦横が違えば別の画像
        h = hashlib.sha256(f"{sample.width}x{sample.height}:".encode("ascii"))
        h.update(sample.pixels)
        return cls(h.hexdigest())

    def short(self) -> str:
        return self.digest[:12]


class Decision(Enum):
    NEW = "new"
    ECHO_OF_OWN_OUTPUT = "echo"


class FingerprintTracker:
    """直前に公開した出力のフィンガープリントを保持する。"""

    def __init__(self) -> None:
        self._last: Optional[Fingerprint] = None

    @property
    def last(self) -> Optional[Fingerprint]:
        return self._last

    def observe(self, candidate: Fingerprint) -> Decision:
        """候補が自分の直前の出力かどうかを判定する（状態は変更しない）。"""
        if self._last is not None and candidate == self._last:
            return Decision.ECHO_OF_OWN_OUTPUT
        return Decision.NEW

    def record(self, fingerprint: Fingerprint) -> None:
        self._last = fingerprint

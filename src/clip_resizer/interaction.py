"""ターミナルでの対話入力。"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Protocol, Sequence, TextIO, Tuple, TypeVar

from clip_resizer.errors import InteractionAborted

T = TypeVar("T")


class InteractionPort(Protocol):
    """不足している情報をユーザーに問い合わせる窓口。

    ask_value / ask_choice はどちらも妥当な値が得られるまで再入力を求め、
    不正な値を返してはならない。入力が打ち切られた場合は InteractionAborted を送出する。
    """

    def ask_value(self, label: str, parser: Callable[[str], T]) -> T: ...

    def ask_choice(self, label: str, options: Sequence[Tuple[str, T]]) -> T: ...


class TerminalInteraction:
    """標準入出力を使う InteractionPort の実装"""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ) -> None:
        self._input = input_func
        self._output = output

    def _print(self, text: str) -> None:
        print(text, file=self._output or sys.stderr, flush=True)

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise InteractionAborted("入力が中断されました")

    def ask_value(self, label: str, parser: Callable[[str], T]) -> T:
        while True:
            raw = self._read(f"{label}: ")
            try:
                return parser(raw)
            except ValueError as e:
                self._print(f"  ✗ {e}")

    def ask_choice(self, label: str, options: Sequence[Tuple[str, T]]) -> T:
        if not options:
            raise ValueError("選択肢がありません")

        self._print(f"? {label}")
        for idx, (text, _value) in enumerate(options, 1):
            self._print(f"  {idx}) {text}")

        count = len(options)
        while True:
            raw = self._read(f"番号を選択 [1-{count}] (既定: 1): ").strip()
            if not raw:
                return options[0][1]
            if raw.isdigit() and 1 <= int(raw) <= count:
                return options[int(raw) - 1][1]
            self._print(f"  ✗ 1から{count}の番号を入力してください")

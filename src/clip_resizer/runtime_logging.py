"""実行ログの保存先を決める。古いログの削除は loguru の retention に任せる。"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

APP_NAME = "ClipResizer"
LOG_DIR_ENV = "CLIP_RESIZER_LOG_DIR"
# loguru が起動時刻でファイル名を展開し、同じパターンの古いファイルを削除する
RUN_LOG_PATTERN = "run_{time:YYYYMMDD_HHmmss}.log"
LOG_RETENTION = "30 days"


def get_default_log_dir(
    *,
    platform: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> Path:
    """OSごとの標準ログディレクトリを返す。"""
    platform = platform or sys.platform
    env = env if env is not None else os.environ
    home = home or Path.home()

    if platform == "win32":
        base = env.get("LOCALAPPDATA") or env.get("APPDATA")
        return Path(base) / APP_NAME / "logs" if base else home / APP_NAME / "logs"
    if platform == "darwin":
        return home / "Library" / "Logs" / APP_NAME

    state_home = env.get("XDG_STATE_HOME") or str(home / ".local" / "state")
    return Path(state_home) / APP_NAME.lower() / "logs"


def resolve_log_dir(env: Optional[Mapping[str, str]] = None) -> Path:
    """環境変数 CLIP_RESIZER_LOG_DIR を優先してログディレクトリを決める。"""
    env = env if env is not None else os.environ
    override = env.get(LOG_DIR_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return get_default_log_dir(env=env)


def prepare_run_log(env: Optional[Mapping[str, str]] = None) -> Path:
    """
    ログディレクトリを作成し、loguru に渡すファイルパスのテンプレートを返します

    Raises:
        OSError: ディレクトリを作成できない場合
    """
    log_dir = resolve_log_dir(env)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / RUN_LOG_PATTERN

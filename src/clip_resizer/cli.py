#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
クリップボード画像リサイズツールのコマンドラインエントリーポイント
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from clip_resizer.clipboard import SystemClipboard
from clip_resizer.config import build_resize_request
from clip_resizer.errors import ConfigError
from clip_resizer.interaction import TerminalInteraction
from clip_resizer.report import BANNER, build_session_summary_text, describe_request
from clip_resizer.resize_core import setup_logging
from clip_resizer.runtime_logging import LOG_RETENTION, prepare_run_log
from clip_resizer.watch_loop import WatchLoop


def _build_arg_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI use."""
    p = argparse.ArgumentParser(
        prog="clip-resizer",
        description="クリップボードにコピーされた画像をリサイズしてクリップボードに戻すツール",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    p.add_argument("-H", "--height", type=int, help="リサイズ後の高さ (px、--percent 指定時は%%)")
    p.add_argument("-W", "--width", type=int, help="リサイズ後の幅 (px、--percent 指定時は%%)")
    p.add_argument(
        "-p", "--percent", action="store_true", help="--height / --width を元画像に対するパーセント (1-99) として扱う"
    )
    p.add_argument("-r", "--ratio", type=float, help="高さと幅に掛ける倍率 (0より大きく1以下)")
    p.add_argument(
        "-i",
        "--ignore-aspect-ratio",
        action="store_true",
        help="片方の辺だけ指定したとき、縦横比を維持せずもう一方を画像ごとに入力する",
    )
    p.add_argument("--verbose", "-v", action="count", default=0, help="詳細ログを増やす (重ね掛け可)")
    p.add_argument("--no-log-file", action="store_true", help="ログファイルを出力しない")
    p.add_argument("--no-banner", action="store_true", help="起動時のバナーを表示しない")
    return p


def _console_level(verbose: int) -> str:
    if verbose == 1:
        return "DEBUG"
    if verbose >= 2:
        return "TRACE"
    return "INFO"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI を実行します"""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    log_path: Optional[Path] = None
    log_dir_error: Optional[OSError] = None
    if not args.no_log_file:
        try:
            log_path = prepare_run_log()
        except OSError as e:
            log_dir_error = e

    setup_logging(console_level=_console_level(args.verbose), log_file=log_path, retention=LOG_RETENTION)
    if log_dir_error is not None:
        logger.warning(f"ログディレクトリを作成できません。ファイルへのログ出力を無効にします: {log_dir_error}")

    try:
        request = build_resize_request(
            height=args.height,
            width=args.width,
            percent=args.percent,
            ratio=args.ratio,
            ignore_aspect_ratio=args.ignore_aspect_ratio,
        )
    except ConfigError as e:
        logger.error(f"設定エラー: {e}")
        return 1

    if not args.no_banner:
        print(BANNER)
    logger.info(f"リサイズ設定: {describe_request(request)}")
    if log_path is not None:
        logger.debug(f"ログ出力先: {log_path.parent}")

    loop = WatchLoop(
        clipboard=SystemClipboard(),
        request=request,
        interaction=TerminalInteraction(),
    )
    try:
        loop.run()
    except KeyboardInterrupt:
        logger.info("中断シグナルを受信しました。終了します")

    session = loop.session
    logger.info(
        build_session_summary_text(
            published=session.published,
            failed=session.failed,
            skipped_echo=session.skipped_echo,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())

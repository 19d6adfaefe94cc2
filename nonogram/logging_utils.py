# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- ソルバーの進み具合（何回目の反復か、未確定マスがいくつ残っているか）は
  print ではなくログとして出します。
- 盤面そのものの表示は呼び出し側（CLI や API）の仕事です。
"""

from __future__ import annotations

import logging

# nonogram パッケージ共通で使うロガー名
LOGGER_NAME = "nonogram"


def get_logger() -> logging.Logger:
    """
    nonogram 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def set_log_level(level: int) -> None:
    """共通ロガーの出力レベルを変更します（CLI の --quiet などから使用）。"""
    get_logger().setLevel(level)

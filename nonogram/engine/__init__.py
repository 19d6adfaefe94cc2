# -*- coding: utf-8 -*-
"""
nonogram.engine パッケージ

行と列をまたいだ制約伝播を行います。
- parallel.py    : 線ごとの独立な計算を joblib で並列に回す
- propagation.py : 行マスクと列マスクの突き合わせ（同期点）
- loop.py        : 初期化 → 反復 → 解けた / 矛盾 / 停滞 の状態遷移
"""

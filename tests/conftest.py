# tests/conftest.py
"""
テスト全体の共通設定。
Qtウィジェットのテストをディスプレイの無い環境でも実行できるようにします。
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

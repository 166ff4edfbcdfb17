"""
共通の型定義を提供するモジュール。
CPU、スケジューラ、UIなど複数のレイヤーで共通して使用される型エイリアスを定義します。
"""
from typing import Dict

# @intent:data_structure 論理キー(0x0-0xF)から物理キー識別子(Qtのキーコード)への対応表。
KeyMap = Dict[int, int]

# retro_chip8/common/errors.py
"""
プロジェクト共通の例外定義。

起動前（セットアップ時）のエラーのみを例外として扱います。
実行中の未知命令などは例外にせず、ログに報告して処理を継続します。
"""


# @intent:responsibility 本パッケージが送出する全ての例外の基底クラス。
class Chip8Error(Exception):
    pass


# @intent:responsibility プログラムイメージの読み込みに失敗したことを示します。
class ProgramLoadError(Chip8Error):
    pass


# @intent:responsibility 設定ファイルの内容が不正であることを示します。
class ConfigError(Chip8Error):
    pass


# @intent:responsibility 表示系（ウィンドウ、サーフェス）の初期化に失敗したことを示します。
class DisplayInitError(Chip8Error):
    pass

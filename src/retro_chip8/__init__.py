# retro_chip8/__init__.py
"""
CHIP-8 系 8bit ファンタジー命令セットの仮想マシン。
"""
__version__ = "0.1.0"

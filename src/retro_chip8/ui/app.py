# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
引数を解析し、設定・フォント・プログラムを準備してからメインウィンドウを起動します。

終了コード: 正常終了（ユーザーによる終了を含む）は 0、セットアップ時のエラーは 1。
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from retro_chip8.common.errors import Chip8Error
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import EmulatorConfig
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.display.framebuffer import Framebuffer
from retro_chip8.loader.loader import ProgramLoader
from retro_chip8.timer.timers import TimerDriver
from retro_chip8.transport.bus import Memory
from .keyboard import KeyboardState, key_map_from_names
from .main_window import MainWindow

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SETUP_FAILURE = 1

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="Chip-8 virtual machine")
    parser.add_argument("program", nargs="?", help="Program image to load at 0x200")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser

# @intent:responsibility 設定に従ってメモリ、フレームバッファ、キーボード、CPU、タイマーを組み立て、プログラムをロードします。
# @intent:post-condition 失敗した場合は Chip8Error のサブクラスを送出します。
def build_machine(config: EmulatorConfig, program_path: str):
    memory = Memory()
    framebuffer = Framebuffer(config.display.width, config.display.height)
    keyboard = KeyboardState(key_map_from_names(config.keys))
    cpu = Chip8Cpu(memory, framebuffer, keyboard,
                   rng=random.Random(config.cpu.seed), sprite_wrap=config.cpu.sprite_wrap)
    ProgramLoader().load_file(program_path, memory)
    timers = TimerDriver(cpu.get_state(), rate_hz=config.cpu.timer_hz)
    return cpu, timers, keyboard

# @intent:responsibility アプリケーションを起動し、終了コードを返します。
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.program:
        print("Missing file argument", file=sys.stderr)
        return EXIT_SETUP_FAILURE

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else EmulatorConfig()
        cpu, timers, keyboard = build_machine(config, args.program)
    except Chip8Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SETUP_FAILURE

    try:
        app = QApplication.instance() or QApplication([sys.argv[0]])
        main_win = MainWindow(cpu, timers, keyboard, config)
    except (Chip8Error, RuntimeError) as e:
        print(f"Display initialization failed: {e}", file=sys.stderr)
        return EXIT_SETUP_FAILURE

    main_win.show()
    main_win.start()
    app.exec()
    logger.debug("Exited after %d instructions", cpu.instruction_count)
    return EXIT_OK

def run():
    sys.exit(main())

if __name__ == '__main__':
    run()

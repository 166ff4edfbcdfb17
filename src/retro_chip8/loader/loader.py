# retro_chip8/loader/loader.py
"""
プログラムローダーモジュール。

ヘッダもチェックサムも無い生のバイナリイメージを 0x200 から配置します。
"""
import logging
from pathlib import Path
from typing import Union

from retro_chip8.common.errors import ProgramLoadError
from retro_chip8.core.state import PROGRAM_START
from retro_chip8.transport.bus import Memory, MEMORY_SIZE

logger = logging.getLogger(__name__)

# @intent:constant ロード可能な最大バイト数。
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START

class ProgramLoader:
    """
    バイナリ形式のプログラムイメージをメモリにロードするローダー。
    短いファイルはそのまま受け入れ、長すぎるファイルは末尾を切り捨てます。
    """
    # @intent:responsibility バイト列をプログラム領域に書き込み、書き込んだバイト数を返します。
    def load_bytes(self, data: bytes, memory: Memory) -> int:
        if len(data) > MAX_PROGRAM_SIZE:
            logger.debug("Program image truncated from %d to %d bytes", len(data), MAX_PROGRAM_SIZE)
            data = data[:MAX_PROGRAM_SIZE]
        return memory.load(PROGRAM_START, data)

    # @intent:responsibility ファイルを読み込んでプログラム領域に書き込みます。
    # @intent:post-condition 読み込みに失敗した場合は ProgramLoadError を送出します。
    def load_file(self, file_path: Union[str, Path], memory: Memory) -> int:
        try:
            with open(file_path, 'rb') as f:
                data = f.read(MAX_PROGRAM_SIZE + 1)
        except OSError as e:
            raise ProgramLoadError(f"Failed to read program file {file_path}: {e.strerror or e}") from e
        size = self.load_bytes(data, memory)
        logger.info("Loaded %d bytes from %s", size, file_path)
        return size

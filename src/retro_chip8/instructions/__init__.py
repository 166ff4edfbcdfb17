# src/retro_chip8/instructions/__init__.py
"""
命令セット実装パッケージ。
"""
import logging

from retro_chip8.core.operation import Operation
from .base import ExecutionContext
from .maps import DECODE_MAP, EXECUTE_MAP, dispatch_key

logger = logging.getLogger(__name__)

UNKNOWN = "UNKNOWN"

# @intent:responsibility 16ビット命令語をデコードします。
def decode_opcode(opcode: int) -> Operation:
    """
    命令語をデコードし、Operationオブジェクトを返します。
    対応する命令が無い場合はニーモニック UNKNOWN の Operation を返します。
    """
    decoder = DECODE_MAP.get(dispatch_key(opcode))
    if decoder:
        return decoder(opcode)
    return Operation(opcode, UNKNOWN, [f"${opcode:04X}"])

# @intent:responsibility デコードされた命令を実行し、フレームバッファを変更したかを返します。
# @intent:rationale 未知の命令は例外にせず警告ログを出して無操作とします（PCは既に進んでいる）。
def execute_instruction(operation: Operation, ctx: ExecutionContext) -> bool:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(dispatch_key(operation.opcode))
    if executor is None:
        logger.warning("Unknown instruction 0x%04X at 0x%03X", operation.opcode, (ctx.state.pc - 2) & 0xFFF)
        return False
    return executor(ctx, operation)

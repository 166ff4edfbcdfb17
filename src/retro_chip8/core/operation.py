# retro_chip8/core/operation.py
"""
デコード済み命令の表現。
"""
from dataclasses import dataclass, field
from typing import List

# @intent:responsibility 16ビット命令語と、そのニーモニック・オペランド表記を記録します。
@dataclass(frozen=True)
class Operation:
    """
    デコードされた1命令。
    オペランドのビットフィールド(x, y, n, nn, nnn)は命令語から導出されます。
    """
    opcode: int  # 例: 0x6A12
    mnemonic: str  # 例: "LD"
    operands: List[str] = field(default_factory=list)  # 例: ["VA", "#12"]

    @property
    def x(self) -> int:
        return (self.opcode >> 8) & 0xF

    @property
    def y(self) -> int:
        return (self.opcode >> 4) & 0xF

    @property
    def n(self) -> int:
        return self.opcode & 0xF

    @property
    def nn(self) -> int:
        return self.opcode & 0xFF

    @property
    def nnn(self) -> int:
        return self.opcode & 0xFFF

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    def __str__(self) -> str:
        if self.operands:
            return f"{self.mnemonic} {', '.join(self.operands)}"
        return self.mnemonic

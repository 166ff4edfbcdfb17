# retro_chip8/transport/bus.py
"""
Transport Layer (メモリ空間)

このモジュールは、4096バイトの固定アドレス空間を抽象化します。
全てのアクセスはアドレスを12ビットでマスクしてから行われ、範囲外アクセスで
例外が発生することはありません（ラップアラウンド）。
"""
from typing import Iterable

# @intent:constant アドレス空間のサイズとマスク。
MEMORY_SIZE = 0x1000
ADDRESS_MASK = 0x0FFF

# @intent:utility_function 任意の整数を12ビットアドレスに正規化します。
def wrap_address(address: int) -> int:
    return address & ADDRESS_MASK

# @intent:responsibility 基本的なRAMデバイスの機能を提供します。
class RAM:
    """
    境界チェック付きのバイト配列。
    アドレスのラップは上位の Memory が担当し、RAM自体は厳密に範囲を検査します。
    """
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        self._memory = bytearray(size)
        self._size = size

    def read(self, address: int) -> int:
        if not 0 <= address < self._size:
            raise IndexError(f"Address {address} out of bounds for RAM of size {self._size}.")
        return self._memory[address]

    def write(self, address: int, data: int) -> None:
        if not 0 <= address < self._size:
            raise IndexError(f"Address {address} out of bounds for RAM of size {self._size}.")
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        self._memory[address] = data

    def get_size(self) -> int:
        return self._size

# @intent:responsibility 12ビットアドレス空間を管理し、全てのアクセスでアドレスをラップさせます。
# @intent:rationale 計算されたアドレスがどんな値でもフォルトさせないことが不変条件です。
class Memory:
    """
    4096バイトのアドレス空間。
    read/write に渡されたアドレスは常に `address & 0x0FFF` として解釈されます。
    """
    def __init__(self):
        self._ram = RAM(MEMORY_SIZE)

    def read(self, address: int) -> int:
        """
        指定されたアドレスから8bitのデータを読み出します。
        アドレスは12ビットにマスクされます。
        """
        return self._ram.read(wrap_address(address))

    def write(self, address: int, data: int) -> None:
        """
        指定されたアドレスに8bitのデータを書き込みます。
        データは下位8ビットのみが使用されます。
        """
        self._ram.write(wrap_address(address), data & 0xFF)

    # @intent:responsibility バイト列をそのまま連続アドレスに書き込みます（フォント、プログラムイメージ用）。
    def load(self, start: int, data: Iterable[int]) -> int:
        count = 0
        for offset, value in enumerate(data):
            self.write(start + offset, value)
            count += 1
        return count

    # @intent:responsibility 指定範囲のバイト列を返します。範囲は末尾で先頭にラップします。
    def dump(self, start: int, length: int) -> bytes:
        return bytes(self.read(start + offset) for offset in range(length))

    def get_size(self) -> int:
        return self._ram.get_size()
